"""Tests for reading dataset files."""

import logging

import pytest

from campusconnect.datasets.errors import MalformedSource, SourceUnavailable
from campusconnect.datasets.loader import load_dataset, read_source


class TestReadSource:
    def test_missing_file_is_source_unavailable(self, data_dir):
        with pytest.raises(SourceUnavailable):
            read_source(data_dir / "nope.json")

    def test_bad_json_is_malformed_source(self, data_dir):
        path = data_dir / "colleges.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(MalformedSource):
            read_source(path)


class TestLoadDataset:
    def test_loads_list(self, data_dir, write_json):
        path = write_json(data_dir / "colleges.json", [{"name": "A", "location": "Pune"}])
        assert load_dataset(path) == [{"name": "A", "location": "Pune"}]

    def test_missing_required_file_warns_and_returns_empty(self, data_dir, caplog):
        with caplog.at_level(logging.WARNING):
            assert load_dataset(data_dir / "colleges.json") == []
        assert "colleges.json" in caplog.text

    def test_missing_optional_file_is_quiet(self, data_dir, caplog):
        with caplog.at_level(logging.WARNING):
            assert load_dataset(data_dir / "rtu_colleges.json", required=False) == []
        assert caplog.text == ""

    def test_corrupt_file_warns_with_cause(self, data_dir, caplog):
        path = data_dir / "scholarships.json"
        path.write_text("{oops", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_dataset(path) == []
        assert "invalid JSON" in caplog.text

    def test_non_list_document_is_empty(self, data_dir, write_json, caplog):
        path = write_json(data_dir / "colleges.json", {"name": "A"})
        with caplog.at_level(logging.WARNING):
            assert load_dataset(path) == []
        assert "expected a JSON array" in caplog.text

    def test_single_object_is_wrapped(self, data_dir, write_json):
        path = write_json(data_dir / "universities.json", {"name": "RTU", "city": "Kota"})
        assert load_dataset(path, required=False, wrap_object=True) == [{"name": "RTU", "city": "Kota"}]

    def test_empty_object_wraps_to_one_record(self, data_dir, write_json):
        path = write_json(data_dir / "universities.json", {})
        assert load_dataset(path, required=False, wrap_object=True) == [{}]

    def test_null_document_wraps_to_empty(self, data_dir, write_json):
        path = write_json(data_dir / "universities.json", None)
        assert load_dataset(path, required=False, wrap_object=True) == []

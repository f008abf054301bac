"""Shared fixtures for the Campus Connect tests."""

import json

import pytest

from campusconnect.datasets.storage import DatasetStore


SAMPLE_COLLEGES = [
    {"name": "A", "location": "Pune", "branches": ["CS"], "fee": 100},
    {"name": "B", "location": "Pune", "branches": ["ME"], "fee": 200},
]


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    directory.mkdir()
    return directory


@pytest.fixture
def store(data_dir):
    return DatasetStore(
        data_dir,
        colleges=[dict(c) for c in SAMPLE_COLLEGES],
        scholarships=[{"name": "Merit Award", "category": "merit"}],
        universities=[{"name": "RTU"}],
    )


class FakeMessage:
    def __init__(self, content):
        self.content = content


class FakeChoice:
    def __init__(self, content):
        self.message = FakeMessage(content)


class FakeCompletion:
    def __init__(self, content):
        self.choices = [FakeChoice(content)] if content is not None else []


class FakeChatClient:
    """Stands in for ``openai.OpenAI``; records every completion request."""

    def __init__(self, reply="### Answer", error=None):
        self.reply = reply
        self.error = error
        self.calls = []
        self.chat = self
        self.completions = self

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return FakeCompletion(self.reply)


@pytest.fixture
def fake_client():
    return FakeChatClient()


@pytest.fixture
def make_client():
    return FakeChatClient


@pytest.fixture(name="write_json")
def write_json_fixture():
    return write_json

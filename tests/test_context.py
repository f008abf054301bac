"""Tests for the bounded dataset snapshots sent to the model."""

import json

from campusconnect.assistant.context import ContextLimits, bounded_json, build_context


def test_compact_json_without_ascii_escaping():
    text = bounded_json([{"name": "Vidyāpīṭh", "fee": 1}], 10, 1000)

    assert text == '[{"name":"Vidyāpīṭh","fee":1}]'


def test_count_cap_keeps_earliest_records():
    records = [{"i": i} for i in range(10)]

    assert json.loads(bounded_json(records, 3, 10_000)) == [{"i": 0}, {"i": 1}, {"i": 2}]


def test_char_cap_can_cut_mid_record():
    text = bounded_json([{"name": "a" * 50}], 10, 20)

    assert len(text) == 20
    assert text == '[{"name":"aaaaaaaaaa'


def test_colleges_text_is_bounded_for_large_dataset():
    colleges = [{"name": f"College {i}", "location": "Jaipur", "branches": ["CS", "ME"]} for i in range(1000)]

    context = build_context([], colleges, [])

    assert len(context.colleges_text) <= 20000
    first_200 = json.dumps(colleges[:200], ensure_ascii=False, separators=(",", ":"))
    assert first_200.startswith(context.colleges_text)
    assert '"College 200"' not in context.colleges_text


def test_small_datasets_are_untouched():
    universities = [{"name": "RTU"}]
    scholarships = [{"name": "S", "category": "merit"}]

    context = build_context(universities, [], scholarships)

    assert json.loads(context.universities_text) == universities
    assert context.colleges_text == "[]"
    assert json.loads(context.scholarships_text) == scholarships


def test_default_limits():
    limits = ContextLimits()

    assert (limits.max_universities, limits.max_colleges, limits.max_scholarships) == (100, 200, 200)
    assert (limits.universities_chars, limits.colleges_chars, limits.scholarships_chars) == (5000, 20000, 12000)


def test_each_dataset_has_its_own_budget():
    big = [{"blob": "x" * 1000} for _ in range(50)]
    limits = ContextLimits(universities_chars=10, colleges_chars=30, scholarships_chars=50)

    context = build_context(big, big, big, limits=limits)

    assert [len(context.universities_text), len(context.colleges_text), len(context.scholarships_text)] == [10, 30, 50]

"""Tests for the OpenAI client factory."""

from campusconnect.assistant import client as client_module


def test_explicit_api_key_is_used(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    client = client_module.get_openai_client(api_key="sk-test")

    assert client.api_key == "sk-test"


def test_has_api_key_reads_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    assert client_module.has_api_key()

    monkeypatch.delenv("OPENAI_API_KEY")
    assert not client_module.has_api_key()

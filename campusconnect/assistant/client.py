"""Chat model settings and the OpenAI client used by the assistant.

Only :class:`~campusconnect.assistant.agent.CampusConnectAgent` talks to the
model, and it accepts any object with a ``chat.completions.create`` method,
so the SDK is imported nowhere else. Settings come from the environment,
with a ``.env`` file in the working directory applied first.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
import httpx
from openai import OpenAI


load_dotenv()


DEFAULT_MODEL = os.getenv("CAMPUSCONNECT_MODEL", "gpt-4o-mini")

# Upper bound on one answer, prompt included (seconds).
DEFAULT_TIMEOUT_S = float(os.getenv("CAMPUSCONNECT_TIMEOUT_S", "60"))


def has_api_key() -> bool:
    """True when ``OPENAI_API_KEY`` is set; the server refuses to start otherwise."""
    return bool(os.getenv("OPENAI_API_KEY"))


def get_openai_client(api_key: Optional[str] = None, timeout_s: float = DEFAULT_TIMEOUT_S) -> OpenAI:
    """Build the client for answering questions.

    ``api_key`` overrides ``OPENAI_API_KEY``; ``timeout_s`` is applied to
    every request through the ``httpx`` transport.
    """

    transport = httpx.Client(timeout=httpx.Timeout(timeout_s))
    kwargs = {"http_client": transport}
    if api_key is not None:
        kwargs["api_key"] = api_key
    return OpenAI(**kwargs)

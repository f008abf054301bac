import logging
from typing import Any, Dict, List, Optional

from ..datasets.storage import DatasetStore
from .client import DEFAULT_MODEL, get_openai_client
from .context import ContextLimits, DatasetContext, build_context
from .prompts import CAMPUS_CONNECT_SYSTEM_INSTRUCTIONS, DATASETS_TEMPLATE

logger = logging.getLogger(__name__)


class CampusConnectAgent:
    def __init__(
        self,
        store: DatasetStore,
        client: Any = None,
        model: str = DEFAULT_MODEL,
        limits: ContextLimits = ContextLimits(),
    ):
        self.store = store
        self.client = client if client is not None else get_openai_client()
        self.model = model
        self.limits = limits

    def build_context(self) -> DatasetContext:
        return build_context(
            self.store.universities,
            self.store.colleges,
            self.store.scholarships,
            limits=self.limits,
        )

    def build_messages(self, question: str) -> List[Dict[str, str]]:
        context = self.build_context()
        user_content = DATASETS_TEMPLATE.format(
            universities=context.universities_text,
            colleges=context.colleges_text,
            scholarships=context.scholarships_text,
            question=question,
        )
        return [
            {"role": "system", "content": CAMPUS_CONNECT_SYSTEM_INSTRUCTIONS},
            {"role": "user", "content": user_content},
        ]

    def ask(self, question: str) -> str:
        """
        Answers a free-text question from the current datasets.
        Raises ValueError for an empty question.
        """
        question = (question or "").strip() if isinstance(question, str) else ""
        if not question:
            raise ValueError("Invalid 'prompts': expected non-empty string")

        messages = self.build_messages(question)
        logger.debug("Sending %d chars of context to %s", len(messages[1]["content"]), self.model)

        completion = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
        )

        return _first_choice_text(completion)


def _first_choice_text(completion: Any) -> str:
    choices: Optional[List[Any]] = getattr(completion, "choices", None)
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else ""

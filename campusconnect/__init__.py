"""Campus Connect: college, scholarship and university datasets over HTTP,
with deterministic college search and a language-model assistant that
answers questions from a bounded snapshot of the data.
"""

from .assistant.agent import CampusConnectAgent
from .datasets.storage import DatasetStore

__all__ = ["CampusConnectAgent", "DatasetStore"]

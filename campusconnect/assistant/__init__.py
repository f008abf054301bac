"""Language-model assistant that answers questions from the datasets."""

from .agent import CampusConnectAgent
from .context import ContextLimits, DatasetContext, build_context

__all__ = ["CampusConnectAgent", "ContextLimits", "DatasetContext", "build_context"]

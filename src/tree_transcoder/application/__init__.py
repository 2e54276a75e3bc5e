"""Application-layer use-cases, option and result objects."""

from tree_transcoder.application.options import RunOptions
from tree_transcoder.application.results import FileTaskResult, TreeRunReport

__all__ = ["RunOptions", "FileTaskResult", "TreeRunReport"]

"""Find a file or directory by walking up parent directories."""

from .lib.fs import Entry, FileType
from .search import SearchRequest, find_up, find_up_sync

__all__ = ["Entry", "FileType", "SearchRequest", "find_up", "find_up_sync"]

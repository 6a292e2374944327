"""Filesystem probing."""

import asyncio
import os
import stat
from enum import Enum

from .logger import logger


class FileType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"

    @classmethod
    def parse(cls, value: "FileType | str") -> "FileType":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"type must be 'file' or 'directory', got {value!r}") from None


class Entry(Enum):
    """What a probe found at a path."""

    MISSING = "missing"
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
    ERROR = "error"

    def matches(self, type: FileType) -> bool:
        if type is FileType.FILE:
            return self is Entry.FILE
        return self is Entry.DIRECTORY


def probe(path: str) -> Entry:
    """Stat path, following symlinks. Never raises."""
    try:
        mode = os.stat(path).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return Entry.MISSING
    except (OSError, ValueError) as e:
        logger.debug(f"probe failed for {path}: {e}")
        return Entry.ERROR

    if stat.S_ISREG(mode):
        return Entry.FILE
    if stat.S_ISDIR(mode):
        return Entry.DIRECTORY
    return Entry.OTHER


async def aprobe(path: str) -> Entry:
    return await asyncio.get_running_loop().run_in_executor(None, probe, path)

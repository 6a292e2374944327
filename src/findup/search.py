"""Find a file or directory by walking up parent directories."""

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .lib.fs import FileType, aprobe, probe
from .lib.logger import logger
from .lib.paths import Location, candidate, resolve, root_of, to_path


@dataclass(frozen=True)
class SearchRequest:
    """A fully resolved search. Built once before the walk starts."""

    name: str
    type: FileType
    start: str
    stop: str
    root: str

    @classmethod
    def build(
        cls,
        name: str,
        cwd: Location,
        type: FileType | str = FileType.FILE,
        stop_at: Location | None = None,
    ) -> "SearchRequest":
        if not name:
            raise ValueError("name must be a non-empty string")
        start = resolve(to_path(cwd))
        root = root_of(start)
        stop = resolve(start, to_path(stop_at) if stop_at is not None else root)
        return cls(name=name, type=FileType.parse(type), start=start, stop=stop, root=root)


def ancestors(request: SearchRequest) -> Iterator[str]:
    """Yield the directories to search, nearest first.

    The start directory is always yielded. After it, the walk ends before
    reaching the stop boundary or the filesystem root.
    """
    directory = request.start
    while True:
        yield directory
        if directory == request.stop or directory == request.root:
            return
        parent = os.path.dirname(directory)
        if not parent or parent == directory:
            return
        if parent == request.stop or parent == request.root:
            return
        directory = parent


def find_up_sync(
    name: str,
    cwd: Location | None = None,
    type: FileType | str = FileType.FILE,
    stop_at: Location | None = None,
) -> Path | None:
    """Find a file or directory by walking up parent directories.

    Returns the matching path, or None if nothing matched before the stop
    boundary. ``cwd`` defaults to the process working directory; ``stop_at``
    defaults to the root of ``cwd``.
    """
    request = SearchRequest.build(name, os.getcwd() if cwd is None else cwd, type, stop_at)
    return search_sync(request)


async def find_up(
    name: str,
    cwd: Location | None = None,
    type: FileType | str = FileType.FILE,
    stop_at: Location | None = None,
) -> Path | None:
    """Async variant of find_up_sync. Probes one directory at a time."""
    request = SearchRequest.build(name, os.getcwd() if cwd is None else cwd, type, stop_at)
    return await search(request)


def search_sync(request: SearchRequest) -> Path | None:
    for directory in ancestors(request):
        path = candidate(directory, request.name)
        entry = probe(path)
        logger.debug(f"{path}: {entry.value}")
        if entry.matches(request.type):
            return _found(request, path)
    return _not_found(request)


async def search(request: SearchRequest) -> Path | None:
    for directory in ancestors(request):
        path = candidate(directory, request.name)
        entry = await aprobe(path)
        logger.debug(f"{path}: {entry.value}")
        if entry.matches(request.type):
            return _found(request, path)
    return _not_found(request)


def _found(request: SearchRequest, path: str) -> Path:
    logger.debug(f"found {request.type.value} {request.name!r} at {path}")
    return Path(path)


def _not_found(request: SearchRequest) -> None:
    logger.debug(f"no {request.type.value} {request.name!r} between {request.start} and {request.stop}")
    return None

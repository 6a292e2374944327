"""Path and file URL resolution."""

import os
import re
from urllib.parse import ParseResult, SplitResult, urlsplit
from urllib.request import url2pathname

Location = str | os.PathLike | SplitResult | ParseResult

_URL = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def _url_to_path(url: SplitResult | ParseResult) -> str:
    if url.scheme != "file":
        raise ValueError(f"Expected a file URL, got scheme {url.scheme!r}")
    if url.netloc not in ("", "localhost"):
        raise ValueError(f"File URL host must be empty or 'localhost', got {url.netloc!r}")
    if "%2f" in url.path.lower():
        raise ValueError("File URL path must not include encoded '/' characters")
    return url2pathname(url.path)


def to_path(location: Location) -> str:
    """Convert a path or a file URL into a filesystem path string.

    Strings of the form ``scheme://...`` and ``file:...`` are read as URLs.
    """
    if isinstance(location, (SplitResult, ParseResult)):
        return _url_to_path(location)
    path = os.fspath(location)
    if isinstance(path, bytes):
        path = os.fsdecode(path)
    if path.startswith("file:") or _URL.match(path):
        return _url_to_path(urlsplit(path))
    return path


def resolve(*parts: str) -> str:
    """Resolve parts into a normalized absolute path without touching the disk.

    Parts are joined left to right, so a later absolute part replaces
    everything before it. Symlinks are not followed.
    """
    path = ""
    for part in parts:
        if part:
            path = os.path.join(path, part)
    path = os.path.normpath(os.path.abspath(path or os.curdir))
    # POSIX normpath keeps exactly two leading slashes
    if os.name != "nt" and path.startswith("//"):
        path = "/" + path.lstrip("/")
    return path


def root_of(path: str) -> str:
    drive, rest = os.path.splitdrive(path)
    sep = rest[:1]
    return drive + sep if sep in ("/", "\\") else drive


def candidate(directory: str, name: str) -> str:
    if os.path.isabs(name):
        return name
    path = os.path.normpath(os.path.join(directory, name))
    if name.endswith(("/", os.sep)) and not path.endswith(os.sep):
        path += os.sep
    return path

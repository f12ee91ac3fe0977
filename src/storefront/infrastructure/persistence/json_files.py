"""File helpers shared by the JSON-backed repositories.

Writes go to a temporary sibling file that is then renamed over the
target, so a reader sees either the old record or the new one, never a
half-written file.  Read-modify-write cycles take a lock file next to
the record, so processes sharing a data directory take turns.  I/O and
decoding errors surface as StorageUnavailableError.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any
from urllib.parse import quote
from uuid import uuid4

from filelock import FileLock, Timeout

from storefront.domain.exceptions import StorageUnavailableError, ValidationError


# Raised while turning a decoded JSON record into domain objects.
MALFORMED_RECORD_ERRORS = (
    AttributeError,
    KeyError,
    TypeError,
    ValueError,
    ArithmeticError,
    ValidationError,
)


def record_path(directory: Path, key: str) -> Path:
    """Map an arbitrary key to a file inside *directory*."""
    return directory / f"{quote(key, safe='')}.json"


def record_dir(directory: Path, key: str) -> Path:
    """Map an arbitrary key to a subdirectory of *directory*."""
    name = quote(key, safe="")
    if name in (".", ".."):
        name = name.replace(".", "%2E")
    return directory / name


def read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise StorageUnavailableError(f"Could not read {path.name}: {exc}") from exc


def write_json(path: Path, data: Any) -> None:
    tmp = path.with_name(f".{path.name}.{uuid4().hex}.tmp")
    try:
        tmp.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise StorageUnavailableError(f"Could not write {path.name}: {exc}") from exc


def ensure_dir(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageUnavailableError(f"Could not create {directory}: {exc}") from exc


LOCK_TIMEOUT_SECONDS = 10.0


@contextmanager
def record_lock(path: Path, timeout: float = LOCK_TIMEOUT_SECONDS) -> Iterator[None]:
    """Hold an OS-level lock on *path* for the duration of the block."""
    lock = FileLock(path.with_name(f"{path.name}.lock"), timeout=timeout)
    try:
        lock.acquire()
    except Timeout as exc:
        raise StorageUnavailableError(f"{path.name} is locked by another process") from exc
    except OSError as exc:
        raise StorageUnavailableError(f"Could not lock {path.name}: {exc}") from exc
    try:
        yield
    finally:
        lock.release()

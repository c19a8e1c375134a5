from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from result import Result


class ArtifactSource(Protocol):
    def snapshot(self) -> dict[str, int]:
        """Return a point-in-time copy of ``{name: byte_length}``."""
        ...


class ArtifactStore:
    """Name-keyed artifact bytes shared between build producers and readers.

    Writers go through :meth:`put` and :meth:`remove`. Readers call
    :meth:`snapshot`, which holds the lock only while sizes are copied out.
    """

    def __init__(self, artifacts: Mapping[str, bytes] | None = None) -> None:
        self._lock = threading.Lock()
        self._artifacts: dict[str, bytes] = dict(artifacts or {})

    @classmethod
    def from_sizes(cls, sizes: Mapping[str, int] | Iterable[tuple[str, int]]) -> ArtifactStore:
        items = sizes.items() if isinstance(sizes, Mapping) else sizes
        return cls({name: bytes(size) for name, size in items})

    def put(self, name: str, data: bytes) -> None:
        with self._lock:
            self._artifacts[name] = bytes(data)

    def remove(self, name: str) -> bool:
        with self._lock:
            return self._artifacts.pop(name, None) is not None

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return {name: len(data) for name, data in self._artifacts.items()}

    def __len__(self) -> int:
        with self._lock:
            return len(self._artifacts)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._artifacts


class MappingSource:
    """Read-only source over a caller-owned ``{name: bytes}`` mapping."""

    def __init__(self, artifacts: Mapping[str, bytes]) -> None:
        self._artifacts = artifacts

    def snapshot(self) -> dict[str, int]:
        return {name: len(data) for name, data in self._artifacts.items()}


class CollectErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    NOT_DIRECTORY = "not_directory"
    ROOT_STAT_FAILED = "root_stat_failed"


@dataclass(slots=True, frozen=True)
class CollectError:
    code: CollectErrorCode
    path: str
    message: str


@dataclass(slots=True)
class CollectedArtifacts:
    root: str
    store: ArtifactStore
    read_errors: int = 0


CollectResult = Result[CollectedArtifacts, CollectError]

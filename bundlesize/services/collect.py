from __future__ import annotations

from result import Err, Ok

from bundlesize.models.artifacts import (
    ArtifactStore,
    CollectedArtifacts,
    CollectError,
    CollectErrorCode,
    CollectResult,
)
from bundlesize.services.fs import DEFAULT_FS, FileSystem


def resolve_root(path: str, fs: FileSystem) -> str | CollectError:
    """Validate and resolve a build output directory.

    Returns the resolved absolute path, or a ``CollectError`` on failure.
    """
    expanded = fs.expanduser(path)
    if not fs.exists(expanded):
        return CollectError(
            code=CollectErrorCode.NOT_FOUND,
            path=expanded,
            message="Path does not exist",
        )

    resolved = fs.absolute(expanded)
    try:
        root_stat = fs.stat(resolved)
    except OSError as exc:
        return CollectError(
            code=CollectErrorCode.ROOT_STAT_FAILED,
            path=resolved,
            message=f"Cannot stat root: {exc}",
        )
    if not root_stat.is_dir:
        return CollectError(
            code=CollectErrorCode.NOT_DIRECTORY,
            path=resolved,
            message="Path is not a directory",
        )
    return resolved


def collect_artifacts(path: str, fs: FileSystem = DEFAULT_FS) -> CollectResult:
    """Load every regular file under *path* into an ``ArtifactStore``.

    Artifacts are keyed by their POSIX path relative to the root. Entries that
    cannot be stat'ed or read are skipped and counted in ``read_errors``.
    """
    resolved = resolve_root(path, fs)
    if isinstance(resolved, CollectError):
        return Err(resolved)

    prefix = resolved.rstrip("/") + "/"
    store = ArtifactStore()
    errors = 0

    stack: list[str] = [resolved]
    while stack:
        current = stack.pop()
        try:
            entries = list(fs.scandir(current))
        except OSError:
            errors += 1
            continue
        for entry in entries:
            if entry.stat is None:
                errors += 1
                continue
            if entry.stat.is_dir:
                stack.append(entry.path)
                continue
            try:
                data = fs.read_bytes(entry.path)
            except OSError:
                errors += 1
                continue
            name = entry.path[len(prefix) :] if entry.path.startswith(prefix) else entry.name
            store.put(name.replace("\\", "/"), data)

    return Ok(CollectedArtifacts(root=resolved, store=store, read_errors=errors))

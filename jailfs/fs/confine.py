"""
Confinement of caller-supplied paths to a sandbox root.

Every function here is pure apart from read-only filesystem lookups; the
working directory and the root are passed in rather than read from process
state, so one root can be shared by several threads.

Resolution runs in four steps:

1. absolutize: join relative input onto the caller's working directory
2. reroot: map the virtual `/` onto the sandbox root
3. canonicalize_existing: resolve the deepest existing ancestor and
   append the not-yet-existing suffix verbatim
4. check: the result must sit under the root, and the components below the
   root must never climb above it (walk_depth)
"""

import errno
import logging
import os
from collections.abc import Iterable
from pathlib import Path, PurePath

from jailfs.fs.errors import CanonicalizationError, PathEscapeError

logger = logging.getLogger(__name__)

_MISSING_ERRNOS = {errno.ENOENT, errno.ENOTDIR}


def _is_root_marker(component: str) -> bool:
    return component != "" and PurePath(component).anchor == component


def walk_depth(components: Iterable[str]) -> int:
    """
    Track nesting depth across a sequence of path components.

    Root markers and "." leave the depth unchanged, ".." decrements it and
    any other component increments it. Walking stops as soon as the depth
    drops below zero, so a negative return value means the sequence climbs
    above its starting point at some position, even if later components
    would descend again.

    Returns:
        Final depth, or -1 if the walk went negative
    """
    depth = 0
    for component in components:
        if component in ("", os.curdir) or _is_root_marker(component):
            continue
        if component == os.pardir:
            depth -= 1
            if depth < 0:
                return -1
        else:
            depth += 1
    return depth


def absolutize(path: str | os.PathLike[str], cwd: str | os.PathLike[str]) -> Path:
    """Join a relative path onto `cwd`; absolute paths are returned as-is."""
    raw = os.fsdecode(path)
    if "\x00" in raw:
        raise CanonicalizationError(raw, None, "embedded null byte")

    candidate = Path(raw)
    if candidate.is_absolute():
        return candidate

    base = Path(os.fsdecode(cwd))
    if not base.is_absolute():
        base = Path(os.sep) / base
    return base / candidate


def reroot(path: Path, root: Path) -> Path:
    """
    Re-anchor an absolute path under `root`.

    "/etc/passwd" becomes "<root>/etc/passwd". A path that already lies
    under `root` is returned unchanged so that confining a confined path
    is a no-op.
    """
    if path.is_relative_to(root):
        return path
    return root.joinpath(*path.parts[1:])


def _exists(candidate: Path, original: Path, root: Path) -> bool:
    try:
        os.stat(candidate)
    except OSError as e:
        if e.errno in _MISSING_ERRNOS:
            return False
        raise CanonicalizationError(original, root, str(e)) from e
    return True


def canonicalize_existing(path: Path, root: Path) -> Path:
    """
    Canonicalize as much of `path` as exists on disk.

    Ancestors are tried deepest first, stopping at `root`. The first one
    that exists is resolved with symlinks followed, and the remainder of
    `path` is appended verbatim since it cannot be resolved yet. If not
    even `root` exists, `path` is returned unchanged.

    Raises:
        CanonicalizationError: If looking up or resolving an ancestor fails
    """
    for ancestor in (path, *path.parents):
        if _exists(ancestor, path, root):
            try:
                canonical = ancestor.resolve(strict=True)
            except (OSError, RuntimeError) as e:
                raise CanonicalizationError(path, root, str(e)) from e
            return canonical / path.relative_to(ancestor)

        if ancestor == root:
            break

    return path


def confine(
    path: str | os.PathLike[str],
    *,
    cwd: str | os.PathLike[str],
    root: Path,
    follow_symlinks: bool = True,
) -> Path:
    """
    Resolve a caller path to a verified absolute path under `root`.

    Args:
        path: Caller-visible path, absolute or relative
        cwd: Caller's virtual working directory, used for relative paths
        root: Canonical sandbox root
        follow_symlinks: If False, a final symlink component is left
            unresolved so that operations can act on the link itself

    Returns:
        Absolute path inside `root`

    Raises:
        PathEscapeError: If the path resolves, or would resolve, outside `root`
        CanonicalizationError: If an existing ancestor cannot be resolved
    """
    rerooted = reroot(absolutize(path, cwd), root)

    if follow_symlinks or rerooted == root or rerooted.name in ("", os.pardir):
        resolved = canonicalize_existing(rerooted, root)
    else:
        resolved = canonicalize_existing(rerooted.parent, root) / rerooted.name

    if not resolved.is_relative_to(root):
        logger.warning("Path escape attempt: %s resolves to %s outside %s", path, resolved, root)
        raise PathEscapeError(path, root)

    if walk_depth(resolved.relative_to(root).parts) < 0:
        logger.warning("Path traversal attempt: %s climbs above %s", path, root)
        raise PathEscapeError(path, root)

    logger.debug("Confined path: %s -> %s", path, resolved)
    return resolved

import logging
import shutil
import tempfile
import weakref
from pathlib import Path

import ulid

logger = logging.getLogger(__name__)


def _remove_tree(path: Path, session_id: str) -> None:
    logger.debug("Tearing down sandbox %s at %s", session_id, path)
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        logger.debug("Sandbox %s was already removed", session_id)


class SandboxRoot:
    """
    A uniquely named temporary directory acting as a virtual filesystem root.

    The directory is removed exactly once: on teardown(), on context
    manager exit, or when the object is garbage collected, whichever
    comes first. A torn-down root is not recreated.
    """

    def __init__(self, path: Path, session_id: str):
        self._path = path
        self._session_id = session_id
        self._finalizer = weakref.finalize(self, _remove_tree, path, session_id)

    @classmethod
    def create(
        cls,
        temp_dir: Path | None = None,
        prefix: str = "jailfs-",
    ) -> "SandboxRoot":
        """
        Allocate a fresh, empty directory.

        Args:
            temp_dir: Parent directory (None: the system temp directory)
            prefix: Leading part of the directory name

        Raises:
            OSError: If the directory cannot be created
        """
        session_id = str(ulid.ULID())
        created = tempfile.mkdtemp(
            prefix=f"{prefix}{session_id.lower()}-",
            dir=str(temp_dir) if temp_dir is not None else None,
        )
        # mkdtemp may hand back a path below a symlinked temp dir
        path = Path(created).resolve(strict=True)
        logger.debug("Created sandbox %s at %s", session_id, path)
        return cls(path, session_id)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def teardown(self) -> None:
        self._finalizer()

    def __enter__(self) -> "SandboxRoot":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.teardown()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"SandboxRoot({str(self._path)!r}, {state})"

"""Output writers.

Writers receive complete documents and a path relative to the site root.
They own directory creation and overwrite behaviour.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from .exceptions import OutputWriteError

logger = logging.getLogger(__name__)


class Writer(ABC):
    """Abstract base class for output writers."""

    @abstractmethod
    def write(self, relative_path: str, content: str | bytes) -> None:
        """Store one complete document.

        Args:
            relative_path: Path relative to the site root, e.g. "papers/x.html"
            content: Document text, or bytes for pre-encoded XML
        """
        pass


class FileSystemWriter(Writer):
    """Write documents below a root directory, replacing existing files.

    Attributes:
        root: Site output directory
    """

    def __init__(self, root: Path):
        self.root = root

    def write(self, relative_path: str, content: str | bytes) -> None:
        target = self.root / relative_path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(f"Failed to write {target}: {e}", target) from e
        logger.debug(f"Wrote {target}")


class MemoryWriter(Writer):
    """Collect documents in memory instead of writing them.

    Attributes:
        outputs: Relative path to document content
    """

    def __init__(self):
        self.outputs: dict[str, str | bytes] = {}

    def write(self, relative_path: str, content: str | bytes) -> None:
        self.outputs[relative_path] = content

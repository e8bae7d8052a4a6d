from abc import ABC, abstractmethod
from pathlib import Path

from scanner_bridge.capture.models import PagePair


class BaseDocumentAssembler(ABC):
    """Contract for all PDF assembly adapters."""

    @abstractmethod
    def assemble(self, pairs: list[PagePair[bytes]], output_path: Path) -> Path:
        """Render every present side of every pair as one PDF page.

        Args:
            pairs: Decoded image bytes per sheet, in print order.
            output_path: Target file. It must not exist yet.

        Returns:
            The written output path.

        Raises:
            FileExistsError: if output_path already exists; nothing is written.
            AssemblyError: if rendering or writing fails. No file is left behind.
        """

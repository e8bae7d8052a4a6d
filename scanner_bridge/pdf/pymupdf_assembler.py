import os
import tempfile
from pathlib import Path

import pymupdf

from scanner_bridge.capture.models import DocumentSide, PagePair, SidePosition
from scanner_bridge.pdf.base import BaseDocumentAssembler
from scanner_bridge.pdf.exceptions import AssemblyError

MM = 72 / 25.4

A4_WIDTH = 210 * MM
A4_HEIGHT = 297 * MM
MARGIN = 10 * MM
CAPTION_BASELINE = 17 * MM
IMAGE_TOP = 20 * MM
IMAGE_WIDTH = 190 * MM

CAPTION_FONT = "hebo"
CAPTION_SIZE = 12

SIDE_LABELS = {SidePosition.FRONT: "Front", SidePosition.BACK: "Back"}


def side_caption(sheet_number: int, position: SidePosition) -> str:
    return f"Sheet {sheet_number} - {SIDE_LABELS[position]}"


class PyMuPdfAssembler(BaseDocumentAssembler):
    """Builds an A4 PDF, one captioned page per scanned side, with PyMuPDF."""

    def assemble(self, pairs: list[PagePair[bytes]], output_path: Path) -> Path:
        if not pairs:
            raise AssemblyError("Nothing to assemble: no sides were given")
        try:
            with pymupdf.open() as doc:  # type: ignore[no-untyped-call]
                for number, pair in enumerate(pairs, start=1):
                    for position, image_bytes in pair.sides():
                        self._render_side(doc, number, DocumentSide(position, image_bytes))
                pdf_bytes = doc.tobytes(garbage=3, deflate=True)
        except AssemblyError:
            raise
        except Exception as exc:
            raise AssemblyError(f"pymupdf rendering failed: {exc}") from exc

        self._write_exclusive(output_path, pdf_bytes)
        return output_path

    def _render_side(self, doc: pymupdf.Document, number: int, side: DocumentSide) -> None:
        page = doc.new_page(width=A4_WIDTH, height=A4_HEIGHT)
        page.insert_text(
            (MARGIN, CAPTION_BASELINE),
            side_caption(number, side.position),
            fontname=CAPTION_FONT,
            fontsize=CAPTION_SIZE,
        )

        # insert_image takes the file by name; the copy lives only for this call.
        fd, name = tempfile.mkstemp(prefix=f"side_{number}_{side.position}_", suffix=".jpg")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(side.image_bytes)
            page.insert_image(self._image_rect(name), filename=name)
        finally:
            Path(name).unlink(missing_ok=True)

    @staticmethod
    def _image_rect(filename: str) -> pymupdf.Rect:
        """Full content width at the fixed top offset, height by aspect ratio."""
        pixmap = pymupdf.Pixmap(filename)
        if pixmap.width == 0:
            raise AssemblyError(f"Image has no width: {filename}")
        height = IMAGE_WIDTH * pixmap.height / pixmap.width
        bottom = min(IMAGE_TOP + height, A4_HEIGHT - MARGIN)
        return pymupdf.Rect(MARGIN, IMAGE_TOP, MARGIN + IMAGE_WIDTH, bottom)

    @staticmethod
    def _write_exclusive(output_path: Path, pdf_bytes: bytes) -> None:
        """Create output_path exclusively so a concurrent writer is never clobbered."""
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            fh = open(output_path, "xb")
        except FileExistsError:
            raise
        except OSError as exc:
            raise AssemblyError(f"Failed to create {output_path}: {exc}") from exc

        try:
            with fh:
                fh.write(pdf_bytes)
        except OSError as exc:
            output_path.unlink(missing_ok=True)
            raise AssemblyError(f"Failed to write {output_path}: {exc}") from exc

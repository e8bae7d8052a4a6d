from scanner_bridge.config.settings import Settings
from scanner_bridge.pdf.base import BaseDocumentAssembler
from scanner_bridge.pdf.pymupdf_assembler import PyMuPdfAssembler


class DocumentAssemblerFactory:
    """Creates the PDF assembler selected by settings."""

    ADAPTERS: dict[str, type[BaseDocumentAssembler]] = {
        "pymupdf": PyMuPdfAssembler,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentAssembler:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

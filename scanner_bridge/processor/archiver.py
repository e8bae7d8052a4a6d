import re
from pathlib import Path

from scanner_bridge.config.settings import Settings
from scanner_bridge.database.models import NewScanRecord, ScanRecord
from scanner_bridge.database.repositories.scan_record_repository import ScanRecordRepository
from scanner_bridge.logging.logger import Log
from scanner_bridge.pdf.base import BaseDocumentAssembler
from scanner_bridge.processor.exceptions import (
    ConflictError,
    DuplicateSerialError,
    InvalidSaveRequestError,
    OutputExistsError,
    RecordRejectedError,
)
from scanner_bridge.processor.models import ArchiveRequest

_SAFE_NAME_PART = re.compile(r"^[\w][\w.\-]*$")


def document_file_path(storage_dir: Path, npsn: str, sn_bapp: str) -> Path:
    """Build the stored PDF path: {storage_dir}/{npsn}_{sn_bapp}.pdf

    Raises:
        InvalidSaveRequestError: if either part could escape storage_dir.
    """
    for label, value in (("npsn", npsn), ("sn_bapp", sn_bapp)):
        if not _SAFE_NAME_PART.match(value):
            raise InvalidSaveRequestError(
                f"{label} '{value}' contains characters not allowed in a file name"
            )
    return storage_dir / f"{npsn}_{sn_bapp}.pdf"


class DocumentArchiver:
    """Turns a scanned sheet into one stored PDF and one scan_records row.

    Order: serial pre-check -> file pre-check -> assemble -> insert. A failed
    insert removes the file written by this call, so a returned error never
    leaves an orphan PDF and a returned record always has its file.
    """

    def __init__(
        self,
        repo: ScanRecordRepository,
        assembler: BaseDocumentAssembler,
        settings: Settings,
    ) -> None:
        self._repo = repo
        self._assembler = assembler
        self._storage_dir = settings.storage_dir

    @property
    def storage_dir(self) -> Path:
        return self._storage_dir

    def archive(self, request: ArchiveRequest) -> ScanRecord:
        """Store the request as a PDF and a record.

        Raises:
            InvalidSaveRequestError: npsn/sn_bapp unusable as a file name.
            DuplicateSerialError: sn_bapp already recorded (pre-check or insert race).
            RecordRejectedError: the insert failed for any other reason.
            OutputExistsError: the target PDF already exists.
            AssemblyError: the PDF could not be produced.
        """
        output_path = document_file_path(self._storage_dir, request.npsn, request.sn_bapp)

        if self._repo.exists_by_serial(request.sn_bapp):
            raise DuplicateSerialError(f"SN BAPP '{request.sn_bapp}' is already registered")

        if output_path.exists():
            raise OutputExistsError(f"File {output_path.name} already exists in storage")

        try:
            self._assembler.assemble(request.pairs(), output_path)
        except FileExistsError as exc:
            raise OutputExistsError(
                f"File {output_path.name} already exists in storage"
            ) from exc
        Log.info(f"Assembled {output_path}")

        try:
            record = self._repo.create(
                NewScanRecord(
                    npsn=request.npsn,
                    sn_bapp=request.sn_bapp,
                    hasil_cek=request.hasil_cek,
                    path=str(output_path),
                    doc_name=request.doc_name,
                    kode=request.kode,
                )
            )
        except ConflictError as exc:
            Log.warning(f"Insert rejected for SN BAPP {request.sn_bapp}, removing PDF: {exc}")
            self._discard(output_path)
            raise
        except Exception as exc:
            Log.error(f"Insert failed for SN BAPP {request.sn_bapp}, removing PDF: {exc}")
            self._discard(output_path)
            raise RecordRejectedError(
                f"Record for SN BAPP '{request.sn_bapp}' could not be stored"
            ) from exc

        Log.info(f"Archived SN BAPP {record.sn_bapp} as record {record.id}")
        return record

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            Log.error(f"Could not remove orphaned PDF {path}: {exc}")

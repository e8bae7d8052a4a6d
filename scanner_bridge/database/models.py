from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewScanRecord:
    """Values for a scan_records row that has not been inserted yet."""

    npsn: str
    sn_bapp: str
    hasil_cek: str
    path: str
    doc_name: str = ""
    kode: str | None = None


@dataclass
class ScanRecord:
    """Represents a row from the scan_records table."""

    id: int
    npsn: str
    sn_bapp: str
    hasil_cek: str
    path: str
    doc_name: str = ""
    kode: str | None = None
    created_at: datetime | None = None

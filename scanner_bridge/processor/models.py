from dataclasses import dataclass, field

from scanner_bridge.capture.models import PagePair


@dataclass(frozen=True)
class ArchiveRequest:
    """Everything needed to turn one scanned sheet into a stored document."""

    npsn: str
    sn_bapp: str
    hasil_cek: str
    image_front: bytes
    image_back: bytes | None = None
    doc_name: str = ""
    kode: str | None = None

    def pairs(self) -> list[PagePair[bytes]]:
        return [PagePair(front=self.image_front, back=self.image_back)]


@dataclass
class CaptureResult:
    """Encoded front/back pairs of one capture, plus any degraded-mode notes."""

    pairs: list[PagePair[str]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

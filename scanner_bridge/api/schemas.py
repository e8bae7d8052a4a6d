from pydantic import BaseModel, ConfigDict, Field, field_validator

from scanner_bridge.pdf.images import decode_data_uri
from scanner_bridge.processor.models import ArchiveRequest


class SaveRequestBody(BaseModel):
    """JSON body of POST /save."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    doc_name: str = ""
    npsn: str = Field(min_length=1, max_length=50)
    sn_bapp: str = Field(min_length=1, max_length=100)
    hasil_cek: str = ""
    kode: str | None = None
    image_front: str = Field(min_length=1)
    image_back: str | None = None

    @field_validator("image_back", "kode")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        return value or None

    def to_archive_request(self) -> ArchiveRequest:
        """Decode both image payloads.

        Raises:
            InvalidImageDataError: if an image is not valid base64.
        """
        return ArchiveRequest(
            npsn=self.npsn,
            sn_bapp=self.sn_bapp,
            hasil_cek=self.hasil_cek,
            image_front=decode_data_uri(self.image_front),
            image_back=decode_data_uri(self.image_back) if self.image_back else None,
            doc_name=self.doc_name,
            kode=self.kode,
        )

from typing import Any

from psycopg.errors import UniqueViolation
from psycopg.rows import dict_row

from scanner_bridge.database.connection import get_connection
from scanner_bridge.database.models import NewScanRecord, ScanRecord
from scanner_bridge.processor.exceptions import DuplicateSerialError

_COLUMNS = "id, npsn, sn_bapp, hasil_cek, path, doc_name, kode, created_at"


def _to_record(row: dict[str, Any]) -> ScanRecord:
    return ScanRecord(
        id=row["id"],
        npsn=row["npsn"],
        sn_bapp=row["sn_bapp"],
        hasil_cek=row["hasil_cek"],
        path=row["path"],
        doc_name=row["doc_name"],
        kode=row["kode"],
        created_at=row["created_at"],
    )


class ScanRecordRepository:
    """Database operations for the scan_records table.

    The UNIQUE constraint on sn_bapp is the only guarantee against duplicates;
    exists_by_serial is an early, racy pre-check.
    """

    def exists_by_serial(self, sn_bapp: str) -> bool:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT 1 FROM scan_records WHERE sn_bapp = %s LIMIT 1",
                    (sn_bapp,),
                )
                return cur.fetchone() is not None

    def find_by_serial(self, sn_bapp: str) -> ScanRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM scan_records WHERE sn_bapp = %s",
                    (sn_bapp,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return _to_record(row)

    def create(self, record: NewScanRecord) -> ScanRecord:
        """Insert a row and return it with its generated id and timestamp.

        Raises:
            DuplicateSerialError: if a row with this sn_bapp already exists.
            psycopg.Error: on any other database failure.
        """
        with get_connection() as conn:
            try:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        INSERT INTO scan_records
                            (npsn, sn_bapp, hasil_cek, path, doc_name, kode)
                        VALUES (%s, %s, %s, %s, %s, %s)
                        RETURNING {_COLUMNS}
                        """,
                        (
                            record.npsn,
                            record.sn_bapp,
                            record.hasil_cek,
                            record.path,
                            record.doc_name,
                            record.kode,
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
            except UniqueViolation as exc:
                conn.rollback()
                raise DuplicateSerialError(
                    f"SN BAPP '{record.sn_bapp}' is already registered"
                ) from exc

        if row is None:
            raise RuntimeError("INSERT ... RETURNING produced no row")
        return _to_record(row)

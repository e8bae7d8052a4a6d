import shutil
import tempfile
import time
from pathlib import Path
from types import TracebackType

from scanner_bridge.capture.exceptions import (
    CaptureError,
    CaptureTimeoutError,
    NoPagesProducedError,
    ScanToolError,
)
from scanner_bridge.capture.pairing import sort_pages
from scanner_bridge.config.settings import Settings
from scanner_bridge.logging.logger import Log
from scanner_bridge.naps2.console import Naps2Console
from scanner_bridge.naps2.exceptions import Naps2NotFoundError, Naps2TimeoutError

# $(nnnn) is NAPS2's zero-padded counter; pairing relies on it sorting by name.
OUTPUT_TEMPLATE = "scan_$(nnnn).jpg"
OUTPUT_GLOB = "scan_*.jpg"


class CaptureSession:
    """One isolated NAPS2 scan in its own temporary directory.

    Use as a context manager; the directory and every page in it are removed
    on exit, whatever the outcome.
    """

    def __init__(self, console: Naps2Console, settings: Settings) -> None:
        self._console = console
        self._default_profile = settings.default_profile_name
        self._timeout_seconds = settings.scan_timeout_seconds
        self._temp_root = settings.scan_temp_dir
        self._directory: Path | None = None

    @property
    def directory(self) -> Path:
        if self._directory is None:
            raise RuntimeError("CaptureSession is not open. Use it as a context manager.")
        return self._directory

    def __enter__(self) -> "CaptureSession":
        root = Path(self._temp_root) if self._temp_root else Path(tempfile.gettempdir())
        try:
            root.mkdir(parents=True, exist_ok=True)
            directory = Path(tempfile.mkdtemp(prefix=f"scan_session_{time.time_ns()}_", dir=root))
        except OSError as exc:
            raise CaptureError(f"Failed to create session directory: {exc}") from exc
        self._directory = directory
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._directory is not None:
            shutil.rmtree(self._directory, ignore_errors=True)
            self._directory = None

    def resolve_profile(self, profile_name: str | None) -> str:
        if profile_name is None or not profile_name.strip():
            return self._default_profile
        return profile_name

    def capture(self, profile_name: str | None = None) -> list[Path]:
        """Scan every sheet in the feeder with the given NAPS2 profile.

        Returns the produced page files in scan order. They live in the session
        directory and disappear when the session closes.

        Raises:
            ScanToolError: NAPS2 exited non-zero (output included verbatim).
            CaptureTimeoutError: the scan exceeded the configured bound.
            NoPagesProducedError: NAPS2 succeeded but wrote no pages.
            CaptureError: NAPS2 could not be started.
        """
        directory = self.directory
        profile = self.resolve_profile(profile_name)
        Log.info(f"Scanning with profile: {profile}")

        try:
            result = self._console.scan(
                directory / OUTPUT_TEMPLATE,
                profile,
                timeout_seconds=self._timeout_seconds,
            )
        except Naps2TimeoutError as exc:
            raise CaptureTimeoutError(str(exc)) from exc
        except Naps2NotFoundError as exc:
            raise CaptureError(str(exc)) from exc

        if not result.ok:
            raise ScanToolError(result.returncode, result.output)

        paths = sort_pages(directory.glob(OUTPUT_GLOB))
        if not paths:
            raise NoPagesProducedError(
                "No pages were produced. Check the scanner connection and paper feeder."
            )

        Log.info(f"Captured {len(paths)} pages with profile {profile}")
        return paths

from collections.abc import Callable
from pathlib import Path

from scanner_bridge.capture.exceptions import CaptureError
from scanner_bridge.capture.models import PagePair
from scanner_bridge.capture.pairing import pair_pages
from scanner_bridge.capture.session import CaptureSession
from scanner_bridge.config.settings import Settings
from scanner_bridge.logging.logger import Log
from scanner_bridge.naps2.console import Naps2Console
from scanner_bridge.pdf.images import encode_data_uri
from scanner_bridge.processor.models import CaptureResult
from scanner_bridge.profiles.reader import list_profile_names, read_profiles_text
from scanner_bridge.profiles.synchronizer import ProfileSynchronizer


class ScanProcessor:
    """Orchestrates one capture request.

    Pipeline: sync profiles -> capture in a temp session -> pair -> encode.
    """

    def __init__(
        self,
        console: Naps2Console,
        synchronizer: ProfileSynchronizer,
        settings: Settings,
        session_factory: Callable[[Naps2Console, Settings], CaptureSession] = CaptureSession,
    ) -> None:
        self._console = console
        self._synchronizer = synchronizer
        self._settings = settings
        self._session_factory = session_factory

    def capture(self, profile_name: str | None = None) -> CaptureResult:
        """Scan the feeder and return data-URI encoded front/back pairs.

        Raises:
            CaptureError: on any capture failure, see CaptureSession.capture.
        """
        result = CaptureResult()
        sync_result = self._synchronizer.sync()
        if sync_result.warning is not None:
            result.warnings.append(sync_result.warning)

        with self._session_factory(self._console, self._settings) as session:
            pages = session.capture(profile_name)
            result.pairs = self._encode_pairs(pair_pages(pages), result.warnings)

        if not result.pairs:
            raise CaptureError("None of the scanned pages could be read")
        Log.info(f"Scan finished, returning {len(result.pairs)} pairs")
        return result

    def list_profiles(self) -> list[str]:
        """Display names from the local authoritative profiles.xml.

        Raises:
            ProfileReadError: if the file is missing or malformed.
        """
        return list_profile_names(read_profiles_text(self._synchronizer.source_path))

    @staticmethod
    def _encode_pairs(pairs: list[PagePair[Path]], warnings: list[str]) -> list[PagePair[str]]:
        """Read and encode each pair.

        An unreadable front drops its whole pair; an unreadable back leaves a
        front-only pair.
        """
        encoded: list[PagePair[str]] = []
        for pair in pairs:
            try:
                front = encode_data_uri(pair.front.read_bytes())
            except OSError as exc:
                message = f"Skipping sheet, front page {pair.front.name} unreadable: {exc}"
                Log.warning(message)
                warnings.append(message)
                continue

            back: str | None = None
            if pair.back is not None:
                try:
                    back = encode_data_uri(pair.back.read_bytes())
                except OSError as exc:
                    message = f"Back page {pair.back.name} unreadable, keeping front only: {exc}"
                    Log.warning(message)
                    warnings.append(message)

            encoded.append(PagePair(front=front, back=back))
        return encoded

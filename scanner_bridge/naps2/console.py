import subprocess
from dataclasses import dataclass
from pathlib import Path

from scanner_bridge.naps2.exceptions import Naps2NotFoundError, Naps2TimeoutError


@dataclass(frozen=True)
class CommandResult:
    """Exit status and combined stdout/stderr of one console call."""

    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class Naps2Console:
    """Thin wrapper around the NAPS2.Console command-line utility.

    Every call blocks until the child exits or its timeout expires; on expiry
    the child is killed by ``subprocess.run`` and Naps2TimeoutError is raised.
    """

    def __init__(self, executable: str | Path) -> None:
        self._executable = str(executable)

    def list_devices(self, driver: str, timeout_seconds: float | None = None) -> CommandResult:
        """Run ``--listdevices --driver <driver>``."""
        return self._run(["--listdevices", "--driver", driver], timeout_seconds)

    def scan(
        self,
        output_pattern: str | Path,
        profile_name: str,
        timeout_seconds: float | None = None,
    ) -> CommandResult:
        """Run a scan with ``-o <pattern> -p <profile> --force``.

        ``--force`` lets NAPS2 overwrite files matching the output pattern.
        """
        return self._run(
            ["-o", str(output_pattern), "-p", profile_name, "--force"],
            timeout_seconds,
        )

    def _run(self, args: list[str], timeout_seconds: float | None) -> CommandResult:
        command = [self._executable, *args]
        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=timeout_seconds,
                check=False,
            )
        except OSError as exc:
            raise Naps2NotFoundError(
                f"NAPS2 console could not be started at '{self._executable}': {exc}"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise Naps2TimeoutError(
                f"NAPS2 console did not finish within {timeout_seconds}s: {' '.join(args)}"
            ) from exc
        output = completed.stdout.decode("utf-8", errors="replace")
        return CommandResult(returncode=completed.returncode, output=output)

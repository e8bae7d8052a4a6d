from dataclasses import dataclass


@dataclass(frozen=True)
class Device:
    """A scanner reachable through one NAPS2 driver backend."""

    identifier: str
    display_name: str
    driver: str

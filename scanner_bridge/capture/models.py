from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class SidePosition(StrEnum):
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class PagePair(Generic[T]):
    """Front and optional back of one physical sheet."""

    front: T
    back: T | None = None

    def sides(self) -> list[tuple[SidePosition, T]]:
        """Present sides in print order."""
        result = [(SidePosition.FRONT, self.front)]
        if self.back is not None:
            result.append((SidePosition.BACK, self.back))
        return result


@dataclass(frozen=True)
class DocumentSide:
    """Decoded image bytes for one side of a sheet."""

    position: SidePosition
    image_bytes: bytes

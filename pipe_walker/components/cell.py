"""Cell component: one visited maze position and its optional letter."""

from dataclasses import dataclass

from pipe_walker.components.position import Position
from pipe_walker.types import Marker


@dataclass(frozen=True)
class Cell:
    """Traversal output unit.

    Attributes:
        position: Where the runner stands.
        marker: Letter recorded there, or ``None`` for pipe / corner / dash fabric.
    """

    position: Position
    marker: Marker = None

    @property
    def is_structural(self) -> bool:
        return self.marker is None

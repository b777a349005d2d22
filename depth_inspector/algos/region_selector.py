"""Pointer-driven selection of the depth region to inspect.

The selector follows the pointer while hovering. A click pins the region at the click
location so it does not drift; clicking inside the pinned region releases it, clicking
outside re-pins it elsewhere. The region becomes visible on the first pointer move or
click and stays visible for the rest of the session.
"""

from dataclasses import dataclass
from enum import Enum

from depth_inspector.algos.errors import PreconditionError


class PointerEventKind(Enum):
    """The pointer events the selector reacts to. Everything else is ``OTHER``."""

    MOVE = "move"
    DOWN = "down"
    OTHER = "other"


@dataclass(frozen=True)
class InspectionPoint:
    """A pixel coordinate. Not clamped to any image; consumers bounds-check."""

    x: int
    y: int


@dataclass(frozen=True)
class SelectorState:
    """Snapshot of a :class:`RegionSelector` handed to the renderer each frame.

    Attributes:
        point (InspectionPoint): Center of the inspected region.
        radius (int): Half-width of the inspected region, in pixels.
        visible (bool): Whether anything should be drawn yet.
        pinned (bool): Whether the region is locked in place.
    """

    point: InspectionPoint
    radius: int
    visible: bool
    pinned: bool

    def contains(self, x: int, y: int) -> bool:
        """Whether ``(x, y)`` lies in the inclusive square around :attr:`point`."""
        return (
            abs(x - self.point.x) <= self.radius
            and abs(y - self.point.y) <= self.radius
        )


class RegionSelector:
    """Interaction state for the depth inspector.

    Args:
        radius (int): Half-width of the inspected neighborhood. Fixed for the lifetime
            of the selector.

    Raises:
        PreconditionError: If ``radius`` is not a non-negative integer.
    """

    def __init__(self, radius: int = 3):
        if isinstance(radius, bool) or not isinstance(radius, int) or radius < 0:
            raise PreconditionError(
                f"radius must be a non-negative integer, got {radius!r}."
            )

        self._radius = radius
        self._point = InspectionPoint(0, 0)
        self._visible = False
        self._pinned = False

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def state(self) -> SelectorState:
        """The current selection state."""
        return SelectorState(
            point=self._point,
            radius=self._radius,
            visible=self._visible,
            pinned=self._pinned,
        )

    def handle_pointer_event(self, kind: PointerEventKind, x: int, y: int) -> None:
        """Updates the selection from a single pointer event.

        Args:
            kind (PointerEventKind): What happened.
            x (int): Pointer x coordinate, in image pixels.
            y (int): Pointer y coordinate, in image pixels.
        """
        if kind not in (PointerEventKind.MOVE, PointerEventKind.DOWN):
            return
        self._visible = True

        if kind is PointerEventKind.MOVE:
            if not self._pinned:
                self._point = InspectionPoint(x, y)
            return

        if self._pinned and self.state.contains(x, y):
            self._pinned = False
            return

        self._pinned = True
        self._point = InspectionPoint(x, y)

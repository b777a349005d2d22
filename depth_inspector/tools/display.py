"""OpenCV window helpers shared by the viewers."""

import cv2
import numpy as np

from depth_inspector.algos import PointerEventKind, RegionSelector
from depth_inspector.utils import get_logger

WINDOW_FLAGS = cv2.WINDOW_AUTOSIZE | cv2.WINDOW_KEEPRATIO | cv2.WINDOW_GUI_NORMAL

EXIT_KEYS = (27, ord("q"), ord("Q"))  # ESC/Q


def is_exit_key(key: int) -> bool:
    """Whether a :func:`cv2.waitKey` result asks to quit."""
    return key != -1 and (key & 0xFF) in EXIT_KEYS


def pointer_event_kind(event: int) -> PointerEventKind:
    """Maps an OpenCV mouse event code onto the events the selector understands."""
    if event == cv2.EVENT_MOUSEMOVE:
        return PointerEventKind.MOVE
    if event == cv2.EVENT_LBUTTONDOWN:
        return PointerEventKind.DOWN
    return PointerEventKind.OTHER


def on_mouse(event: int, x: int, y: int, flags: int, selector: RegionSelector) -> None:
    """Mouse callback forwarding events to a selector, for
    ``cv2.setMouseCallback(window, on_mouse, selector)``."""
    kind = pointer_event_kind(event)
    was_pinned = selector.state.pinned
    selector.handle_pointer_event(kind, x, y)

    if kind is not PointerEventKind.DOWN:
        return
    state = selector.state
    if state.pinned:
        get_logger().debug(f"Pinned region at ({state.point.x}, {state.point.y}).")
    elif was_pinned:
        get_logger().debug(f"Released region at ({state.point.x}, {state.point.y}).")


def side_by_side(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """Concatenates the left and right views horizontally."""
    return cv2.hconcat([left, right])

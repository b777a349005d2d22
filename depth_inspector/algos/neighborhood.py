"""Rendering of the inspected depth neighborhood.

:class:`NeighborhoodRenderer` produces two things each frame from a depth buffer and a
:class:`~depth_inspector.algos.region_selector.SelectorState`:

- a standalone grid image showing the raw depth value of every pixel around the
  inspected point, one cell per pixel, with the center cell highlighted, and
- a rectangle drawn in place onto the depth image marking the inspected region.

Example:

.. code-block:: python

    renderer = NeighborhoodRenderer()
    renderer.annotate(depth, selector.state)
    grid = renderer.render_grid(depth, selector.state, 80, caption=depth_caption)
    if grid is not None:
        cv2.imshow("region", grid)
"""

from dataclasses import dataclass, field
from functools import partial
from typing import Callable

import cv2
import numpy as np

from depth_inspector.algos.errors import PreconditionError
from depth_inspector.algos.region_selector import InspectionPoint, SelectorState
from depth_inspector.utils import Config, config_wrapper

INVALID_DEPTH = 10000
"""Depth samples at or above this value mark missing data (set by reprojection)."""

INVALID_TOKEN = "invalid"

Color = tuple[int, int, int]
SampleFormatter = Callable[[int], str]
CaptionFn = Callable[[np.ndarray, InspectionPoint, int], str]


def format_depth_sample(sample: int, invalid_threshold: int = INVALID_DEPTH) -> str:
    """Formats a raw depth sample for display.

    Args:
        sample (int): The raw depth value.
        invalid_threshold (int): Samples at or above this render as ``"invalid"``.

    Returns:
        str: ``"invalid"`` or the decimal value.
    """
    if sample >= invalid_threshold:
        return INVALID_TOKEN
    return str(int(sample))


def depth_caption(depth: np.ndarray, point: InspectionPoint, radius: int) -> str:
    """The caption shown above the depth grid: inspected position and units."""
    return f"depth pos: [{point.y}, {point.x}]+/-{radius}, unit: mm"


def annotation_half_width(radius: int) -> int:
    """Half-width of the rectangle drawn around a region, just outside it."""
    return max(radius, 1) + 1


@config_wrapper
class NeighborhoodRendererConfig(Config):
    """
    Configuration for the neighborhood renderer. Colors are BGR.

    Attributes:
        invalid_threshold (int): Samples at or above this render as ``invalid``.
        font_face (int): OpenCV Hershey font used for cell text and the caption.
        font_scale (float): Font scale.
        thickness (int): Text stroke thickness.
        caption_margin (int): Offset of the caption from the top-left corner.
        background_color (list[int]): Canvas fill.
        text_color (list[int]): Cell text.
        center_color (list[int]): Text of the cell at the inspected point.
        caption_color (list[int]): Caption text.
        pinned_color (list[int]): Region rectangle while pinned.
        hover_color (list[int]): Region rectangle while following the pointer.
        pinned_depth_value (int): Region rectangle while pinned, on single channel
            images such as the raw depth frame.
        hover_depth_value (int): Region rectangle while following the pointer, on
            single channel images.
    """

    invalid_threshold: int = INVALID_DEPTH
    font_face: int = cv2.FONT_HERSHEY_PLAIN
    font_scale: float = 1.0
    thickness: int = 1
    caption_margin: int = 5

    background_color: list[int] = field(default_factory=lambda: [255, 255, 255])
    text_color: list[int] = field(default_factory=lambda: [0, 0, 0])
    center_color: list[int] = field(default_factory=lambda: [0, 0, 255])
    caption_color: list[int] = field(default_factory=lambda: [255, 0, 255])
    pinned_color: list[int] = field(default_factory=lambda: [0, 255, 0])
    hover_color: list[int] = field(default_factory=lambda: [0, 0, 255])
    pinned_depth_value: int = 65535
    hover_depth_value: int = 0


@dataclass(frozen=True)
class GridCell:
    """One laid-out cell of the neighborhood grid.

    Attributes:
        offset (tuple[int, int]): ``(i, j)`` offset from the inspected point.
        sample (int): The raw depth value at the offset.
        text (str): The formatted sample.
        origin (tuple[int, int]): Bottom-left corner of the text on the canvas.
        color (Color): Text color.
    """

    offset: tuple[int, int]
    sample: int
    text: str
    origin: tuple[int, int]
    color: Color

    @property
    def is_center(self) -> bool:
        return self.offset == (0, 0)


class NeighborhoodRenderer:
    """Draws the depth neighborhood of a :class:`SelectorState`.

    Args:
        config (NeighborhoodRendererConfig | None): Rendering options. Defaults are
            used when None.
    """

    def __init__(self, config: NeighborhoodRendererConfig | None = None):
        self._config = config if config is not None else NeighborhoodRendererConfig()

    @property
    def config(self) -> NeighborhoodRendererConfig:
        return self._config

    @property
    def default_formatter(self) -> SampleFormatter:
        return partial(
            format_depth_sample, invalid_threshold=self._config.invalid_threshold
        )

    def grid_size(self, state: SelectorState, cell_size: int) -> int:
        """Side length, in pixels, of the grid canvas for ``state``."""
        return (2 * state.radius + 1) * cell_size

    def layout_grid(
        self,
        depth: np.ndarray,
        state: SelectorState,
        cell_size: int,
        formatter: SampleFormatter | None = None,
    ) -> list[GridCell]:
        """Lays out the text of every in-bounds cell around ``state.point``.

        Cells whose sample coordinate falls outside ``depth`` are left out.

        Args:
            depth (np.ndarray): 2D depth buffer, indexed ``[y, x]``.
            state (SelectorState): The region to lay out.
            cell_size (int): Side length of one cell, in pixels.
            formatter (SampleFormatter | None): Sample to text conversion. Defaults
                to :func:`format_depth_sample` with the configured threshold.

        Returns:
            list[GridCell]: The cells, column by column.
        """
        self._check_depth(depth)
        self._check_cell_size(cell_size)
        formatter = formatter or self.default_formatter

        cfg = self._config
        height, width = depth.shape
        r = state.radius
        cells: list[GridCell] = []
        for i in range(-r, r + 1):
            x = state.point.x + i
            if x < 0 or x >= width:
                continue
            for j in range(-r, r + 1):
                y = state.point.y + j
                if y < 0 or y >= height:
                    continue

                sample = int(depth[y, x])
                text = formatter(sample)
                (text_w, text_h), _ = cv2.getTextSize(
                    text, cfg.font_face, cfg.font_scale, cfg.thickness
                )
                origin = (
                    (i + r) * cell_size + int((cell_size - text_w) / 2),
                    (j + r) * cell_size + int((cell_size + text_h) / 2),
                )
                color = cfg.center_color if (i, j) == (0, 0) else cfg.text_color
                cells.append(GridCell((i, j), sample, text, origin, tuple(color)))
        return cells

    def render_grid(
        self,
        depth: np.ndarray,
        state: SelectorState,
        cell_size: int = 40,
        caption: str | CaptionFn | None = None,
        formatter: SampleFormatter | None = None,
    ) -> np.ndarray | None:
        """Renders the neighborhood of ``state.point`` as a grid of depth values.

        Args:
            depth (np.ndarray): 2D depth buffer, indexed ``[y, x]``.
            state (SelectorState): The region to render.
            cell_size (int): Side length of one cell, in pixels.
            caption (str | CaptionFn | None): Text drawn in the top-left corner, or a
                function ``(depth, point, radius) -> str`` producing it.
            formatter (SampleFormatter | None): Sample to text conversion.

        Returns:
            np.ndarray | None: A BGR image of side ``(2 * radius + 1) * cell_size``,
            or None while the selection is not visible.
        """
        if not state.visible:
            return None

        cfg = self._config
        cells = self.layout_grid(depth, state, cell_size, formatter)

        size = self.grid_size(state, cell_size)
        canvas = np.empty((size, size, 3), dtype=np.uint8)
        canvas[:] = tuple(cfg.background_color)

        for cell in cells:
            cv2.putText(
                canvas,
                cell.text,
                cell.origin,
                cfg.font_face,
                cfg.font_scale,
                cell.color,
                cfg.thickness,
            )

        if callable(caption):
            caption = caption(depth, state.point, state.radius)
        if caption:
            (_, text_h), _ = cv2.getTextSize(
                caption, cfg.font_face, cfg.font_scale, cfg.thickness
            )
            margin = cfg.caption_margin
            cv2.putText(
                canvas,
                caption,
                (margin, margin + text_h),
                cfg.font_face,
                cfg.font_scale,
                tuple(cfg.caption_color),
                cfg.thickness,
            )

        return canvas

    def annotate(self, image: np.ndarray, state: SelectorState) -> None:
        """Draws the region outline onto ``image`` in place.

        The pixels under the outline are overwritten, so callers must not read depth
        values there afterwards. Single channel images are outlined with
        :attr:`NeighborhoodRendererConfig.pinned_depth_value` or
        :attr:`NeighborhoodRendererConfig.hover_depth_value` instead of a color.

        Args:
            image (np.ndarray): The image to draw on, usually the depth frame itself.
            state (SelectorState): The region to mark.
        """
        if not state.visible:
            return
        if image is None or image.ndim not in (2, 3) or image.size == 0:
            raise PreconditionError("annotate requires a non-empty 2D or 3D image.")

        n = annotation_half_width(state.radius)
        x, y = state.point.x, state.point.y
        cfg = self._config
        if image.ndim == 2 or image.shape[2] == 1:
            value = cfg.pinned_depth_value if state.pinned else cfg.hover_depth_value
            color = (value,)
        else:
            color = tuple(cfg.pinned_color if state.pinned else cfg.hover_color)
        cv2.rectangle(image, (x - n, y - n), (x + n, y + n), color, 1)

    @staticmethod
    def _check_depth(depth: np.ndarray) -> None:
        if depth is None or np.ndim(depth) != 2 or np.size(depth) == 0:
            raise PreconditionError("depth must be a non-empty 2D array.")

    @staticmethod
    def _check_cell_size(cell_size: int) -> None:
        if isinstance(cell_size, bool) or not isinstance(cell_size, int) or cell_size <= 0:
            raise PreconditionError(
                f"cell_size must be a positive integer, got {cell_size!r}."
            )

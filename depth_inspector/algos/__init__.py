"""Inspection algorithms: region selection and neighborhood rendering."""

from depth_inspector.algos.errors import PreconditionError
from depth_inspector.algos.neighborhood import (
    INVALID_DEPTH,
    GridCell,
    NeighborhoodRenderer,
    NeighborhoodRendererConfig,
    annotation_half_width,
    depth_caption,
    format_depth_sample,
)
from depth_inspector.algos.region_selector import (
    InspectionPoint,
    PointerEventKind,
    RegionSelector,
    SelectorState,
)

__all__ = [
    "PreconditionError",
    # neighborhood
    "INVALID_DEPTH",
    "GridCell",
    "NeighborhoodRenderer",
    "NeighborhoodRendererConfig",
    "annotation_half_width",
    "depth_caption",
    "format_depth_sample",
    # region_selector
    "InspectionPoint",
    "PointerEventKind",
    "RegionSelector",
    "SelectorState",
]

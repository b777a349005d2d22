"""Interactive depth-inspection overlay.

Hover over (or click to pin) a pixel of a live depth image to inspect the raw depth
values around it, rendered as a text grid, while the depth image is annotated with the
inspected region.

Subpackages:

- :mod:`depth_inspector.algos`: region selection state machine and neighborhood renderer
- :mod:`depth_inspector.drivers`: depth camera drivers
- :mod:`depth_inspector.tools`: command line viewers
- :mod:`depth_inspector.utils`: logging, config, registry and lifecycle helpers
"""

__version__ = "0.1.0"

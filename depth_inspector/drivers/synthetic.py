"""A depth camera that needs no hardware.

Each frame set holds a sloped depth plane (in millimetres) with a bump that drifts
across the image, a sprinkling of invalid samples, and left/right grayscale views
shaded from the same depth. Handy for trying out the viewers and for tests.
"""

import time
from typing import override

import numpy as np

from depth_inspector.algos.neighborhood import INVALID_DEPTH
from depth_inspector.drivers.depth_camera import (
    DepthCamera,
    DepthCameraConfig,
    FrameSet,
    StreamChannel,
)
from depth_inspector.utils import config_wrapper, get_logger, register


@register
@config_wrapper
class SyntheticDepthCameraConfig(DepthCameraConfig):
    """
    Configuration for the synthetic depth camera.

    Attributes:
        base_depth (int): Depth at the top of the image, in millimetres.
        ramp_depth (int): Depth added from the top to the bottom of the image.
        bump_height (int): How much closer the drifting bump is than the plane.
        invalid_fraction (float): Fraction of samples replaced by the invalid marker.
        disparity (int): Horizontal shift between the left and right views.
        realtime (bool): Pace frame sets at ``fps``. Disable for tests.
        seed (int | None): Seed for the invalid-sample pattern.
    """

    base_depth: int = 800
    ramp_depth: int = 1200
    bump_height: int = 400
    invalid_fraction: float = 0.01
    disparity: int = 16
    realtime: bool = True
    seed: int | None = None


@register
class SyntheticDepthCamera(DepthCamera[SyntheticDepthCameraConfig]):
    """Generates depth and stereo frames on the calling thread."""

    def __init__(self, config: SyntheticDepthCameraConfig):
        super().__init__(config)

        self._rng = np.random.default_rng(config.seed)
        self._frame_index = 0
        self._last_frame_time: float | None = None

        if config.start_on_create:
            self.start()

    @property
    @override
    def channels(self) -> tuple[StreamChannel, ...]:
        return (StreamChannel.LEFT, StreamChannel.RIGHT, StreamChannel.DEPTH)

    @override
    def _start(self) -> None:
        width, height = self.resolution
        get_logger().info(f"Starting synthetic depth stream ({width}x{height}).")
        self._frame_index = 0
        self._last_frame_time = None

    @override
    def _stop(self) -> None:
        get_logger().info(
            f"Stopping synthetic depth stream after {self._frame_index} frames."
        )

    @override
    def _wait_for_frames(self) -> FrameSet:
        if self.config.realtime:
            self._pace()

        depth = self._render_depth(self._frame_index)
        left, right = self._render_stereo(depth)
        self._frame_index += 1
        return {
            StreamChannel.LEFT: left,
            StreamChannel.RIGHT: right,
            StreamChannel.DEPTH: depth,
        }

    def _pace(self) -> None:
        period = 1.0 / self.config.fps
        now = time.perf_counter()
        if self._last_frame_time is not None:
            remaining = period - (now - self._last_frame_time)
            if remaining > 0:
                time.sleep(remaining)
        self._last_frame_time = time.perf_counter()

    def _render_depth(self, index: int) -> np.ndarray:
        cfg = self.config
        width, height = self.resolution
        ys, xs = np.mgrid[0:height, 0:width]

        depth = cfg.base_depth + cfg.ramp_depth * ys / max(height - 1, 1)

        # A bump that drifts across the image, two pixels per frame
        cx = (index * 2) % width
        cy = height / 2
        sigma = max(min(width, height) / 8, 1.0)
        bump = np.exp(-((xs - cx) ** 2 + (ys - cy) ** 2) / (2 * sigma**2))
        depth = depth - cfg.bump_height * bump

        depth = np.clip(np.rint(depth), 0, INVALID_DEPTH - 1).astype(np.uint16)
        if cfg.invalid_fraction > 0:
            invalid = self._rng.random(depth.shape) < cfg.invalid_fraction
            depth[invalid] = INVALID_DEPTH
        return depth

    def _render_stereo(self, depth: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        valid = depth < INVALID_DEPTH
        far = max(self.config.base_depth + self.config.ramp_depth, 1)
        shade = np.where(valid, 255 - (depth.astype(np.float32) * 200 / far), 0)
        left = np.clip(shade, 0, 255).astype(np.uint8)
        right = np.roll(left, -self.config.disparity, axis=1)
        return left, right

    @property
    @override
    def is_okay(self) -> bool:
        return self.is_started or not self.config.start_on_create

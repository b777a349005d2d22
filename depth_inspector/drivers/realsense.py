"""Depth camera driver for Intel RealSense devices.

The :class:`~depth_inspector.drivers.realsense.RealsenseDepthCamera` class wraps a
pyrealsense2 pipeline streaming z16 depth together with the two infrared imagers, which
are exposed as the LEFT and RIGHT channels. A colour stream can be enabled as well.
Frames are copied out of SDK memory, since the SDK reuses its buffers on the next call.
"""

from typing import override

import numpy as np
import pyrealsense2 as rs

from depth_inspector.drivers.depth_camera import (
    DepthCamera,
    DepthCameraConfig,
    FrameSet,
    StreamChannel,
)
from depth_inspector.utils import config_wrapper, get_logger, register


@register
@config_wrapper
class RealsenseDepthCameraConfig(DepthCameraConfig):
    """
    Configuration for RealSense depth cameras.

    Attributes:
        serial (str | None): Device serial number. None uses the first device found.
        enable_color (bool): Also stream colour frames (BGR).
        emitter_enabled (bool | None): Force the IR projector on or off. None leaves
            the device default.
        timeout_ms (int): How long :meth:`RealsenseDepthCamera.wait_for_frames`
            blocks before giving up.
    """

    width: int = 848
    height: int = 480
    serial: str | None = None
    enable_color: bool = False
    emitter_enabled: bool | None = None
    timeout_ms: int = 5000


@register
class RealsenseDepthCamera(DepthCamera[RealsenseDepthCameraConfig]):
    """
    Depth camera class for Intel RealSense devices. Captures frames on the calling
    thread without using background workers.
    """

    def __init__(self, config: RealsenseDepthCameraConfig):
        """
        Initialize a RealsenseDepthCamera instance.

        Args:
            config (RealsenseDepthCameraConfig): The configuration for the camera.
        """
        super().__init__(config)

        self._pipeline: rs.pipeline | None = None
        self._rs_config: rs.config | None = None
        self._setup_pipeline()

        if config.start_on_create:
            self.start()

    def _setup_pipeline(self) -> None:
        """Configure the RealSense pipeline."""
        cfg = self.config
        self._pipeline = rs.pipeline()
        self._rs_config = rs.config()

        if cfg.serial:
            self._rs_config.enable_device(cfg.serial)
        self._rs_config.enable_stream(
            rs.stream.depth, cfg.width, cfg.height, rs.format.z16, cfg.fps
        )
        self._rs_config.enable_stream(
            rs.stream.infrared, 1, cfg.width, cfg.height, rs.format.y8, cfg.fps
        )
        self._rs_config.enable_stream(
            rs.stream.infrared, 2, cfg.width, cfg.height, rs.format.y8, cfg.fps
        )
        if cfg.enable_color:
            self._rs_config.enable_stream(
                rs.stream.color, cfg.width, cfg.height, rs.format.bgr8, cfg.fps
            )

    @property
    @override
    def channels(self) -> tuple[StreamChannel, ...]:
        channels = (StreamChannel.LEFT, StreamChannel.RIGHT, StreamChannel.DEPTH)
        if self.config.enable_color:
            channels += (StreamChannel.COLOR,)
        return channels

    @override
    def _start(self) -> None:
        get_logger().info("Starting RealSense pipeline...")
        profile = self._pipeline.start(self._rs_config)

        device = profile.get_device()
        name = device.get_info(rs.camera_info.name)
        serial = device.get_info(rs.camera_info.serial_number)
        get_logger().info(f"RealSense connected: {name} (S/N: {serial})")

        if self.config.emitter_enabled is not None:
            for sensor in device.query_sensors():
                if sensor.supports(rs.option.emitter_enabled):
                    sensor.set_option(
                        rs.option.emitter_enabled, int(self.config.emitter_enabled)
                    )
            get_logger().debug(f"Emitter enabled: {self.config.emitter_enabled}")

    @override
    def _stop(self) -> None:
        get_logger().info("Stopping RealSense pipeline...")
        self._pipeline.stop()

    @override
    def _wait_for_frames(self) -> FrameSet:
        try:
            frames = self._pipeline.wait_for_frames(self.config.timeout_ms)
        except RuntimeError as e:
            get_logger().error(f"No frames from RealSense: {e}")
            raise

        frame_set: FrameSet = {}
        sources = {
            StreamChannel.DEPTH: frames.get_depth_frame(),
            StreamChannel.LEFT: frames.get_infrared_frame(1),
            StreamChannel.RIGHT: frames.get_infrared_frame(2),
        }
        if self.config.enable_color:
            sources[StreamChannel.COLOR] = frames.get_color_frame()

        for channel, frame in sources.items():
            if not frame:
                get_logger().warning(f"Frame set is missing the {channel.value} frame.")
                continue
            frame_set[channel] = np.asanyarray(frame.get_data()).copy()
        return frame_set

    @property
    @override
    def is_okay(self) -> bool:
        return self._pipeline is not None and (
            self.is_started or not self.config.start_on_create
        )

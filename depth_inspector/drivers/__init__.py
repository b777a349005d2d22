"""Depth camera drivers for the depth_inspector package."""

from depth_inspector.drivers.depth_camera import (
    DepthCamera,
    DepthCameraConfig,
    FrameSet,
    StreamChannel,
)
from depth_inspector.drivers.sensor import Sensor, SensorConfig

# Register the depth camera implementations. Drivers whose SDK is not installed are
# skipped.
DepthCamera.register("SyntheticDepthCamera", f"{__name__}.synthetic")
DepthCameraConfig.register("SyntheticDepthCameraConfig", f"{__name__}.synthetic")
DepthCameraConfig.register(
    "SyntheticDepthCameraConfig", f"{__name__}.synthetic", "SyntheticDepthCamera"
)

DepthCamera.register("RealsenseDepthCamera", f"{__name__}.realsense")
if DepthCameraConfig.register("RealsenseDepthCameraConfig", f"{__name__}.realsense"):
    DepthCameraConfig.register(
        "RealsenseDepthCameraConfig", f"{__name__}.realsense", "RealsenseDepthCamera"
    )

__all__ = [
    # depth_camera
    "DepthCamera",
    "DepthCameraConfig",
    "FrameSet",
    "StreamChannel",
    # sensor
    "Sensor",
    "SensorConfig",
]

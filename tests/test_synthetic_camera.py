import numpy as np
import pytest

from depth_inspector.algos import INVALID_DEPTH
from depth_inspector.drivers import DepthCamera, DepthCameraConfig, StreamChannel
from depth_inspector.drivers.synthetic import (
    SyntheticDepthCamera,
    SyntheticDepthCameraConfig,
)


def make_config(**kwargs) -> SyntheticDepthCameraConfig:
    defaults = dict(width=64, height=48, realtime=False, seed=0)
    defaults.update(kwargs)
    return SyntheticDepthCameraConfig(**defaults)


@pytest.fixture
def camera():
    camera = SyntheticDepthCamera(make_config())
    yield camera
    camera.close()


def test_create_from_config_picks_driver():
    camera = DepthCamera.create_from_config(make_config())
    try:
        assert isinstance(camera, SyntheticDepthCamera)
        assert camera.is_started
    finally:
        camera.close()


def test_config_is_registered():
    assert "SyntheticDepthCameraConfig" in DepthCameraConfig.registry


def test_frame_set_channels(camera):
    frames = camera.wait_for_frames()

    assert set(frames) == set(camera.channels)
    assert set(frames) == {StreamChannel.LEFT, StreamChannel.RIGHT, StreamChannel.DEPTH}


def test_frame_shapes_and_types(camera):
    camera.wait_for_frames()

    depth = camera.get_frame(StreamChannel.DEPTH)
    left = camera.get_frame(StreamChannel.LEFT)
    right = camera.get_frame(StreamChannel.RIGHT)
    assert depth.shape == (48, 64)
    assert depth.dtype == np.uint16
    assert left.shape == right.shape == (48, 64)
    assert left.dtype == np.uint8
    assert camera.resolution == (64, 48)


def test_missing_channel_is_none(camera):
    camera.wait_for_frames()
    assert camera.get_frame(StreamChannel.COLOR) is None


def test_no_frames_before_first_wait(camera):
    assert camera.get_frame(StreamChannel.DEPTH) is None


def test_depth_without_invalid_samples():
    camera = SyntheticDepthCamera(make_config(invalid_fraction=0.0))
    depth = camera.wait_for_frames()[StreamChannel.DEPTH]
    camera.close()

    assert np.all(depth < INVALID_DEPTH)
    assert depth.min() > 0


def test_depth_all_invalid():
    camera = SyntheticDepthCamera(make_config(invalid_fraction=1.0))
    depth = camera.wait_for_frames()[StreamChannel.DEPTH]
    camera.close()

    assert np.all(depth == INVALID_DEPTH)


def test_frames_change_over_time(camera):
    first = camera.wait_for_frames()[StreamChannel.DEPTH]
    second = camera.wait_for_frames()[StreamChannel.DEPTH]
    assert not np.array_equal(first, second)


def test_lazy_start():
    camera = SyntheticDepthCamera(make_config(start_on_create=False))
    assert not camera.is_started
    assert camera.is_okay

    camera.wait_for_frames()
    assert camera.is_started
    camera.close()


def test_close_stops_session(camera):
    camera.wait_for_frames()
    camera.close()

    assert not camera.is_started
    assert not camera.is_okay
    assert camera.get_frame(StreamChannel.DEPTH) is None

    camera.close()

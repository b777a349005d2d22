from functools import partial

import cv2
import numpy as np
import pytest

from depth_inspector.algos import NeighborhoodRendererConfig
from depth_inspector.drivers.synthetic import SyntheticDepthCameraConfig
from depth_inspector.tools.depth_region import cleanup, loop, setup
from depth_inspector.utils import Manager


class FakeHighGui:
    """Records the OpenCV window calls and plays back one pointer move."""

    def __init__(self, pointer=(30, 20)):
        self.windows = []
        self.callbacks = {}
        self.shown = []
        self.destroyed = 0
        self.pointer = pointer
        self.keys = 0

    def named_window(self, name, flags=None):
        self.windows.append(name)

    def set_mouse_callback(self, name, callback, param=None):
        self.callbacks[name] = (callback, param)

    def imshow(self, name, image):
        self.shown.append((self.keys, name, np.array(image, copy=True)))

    def wait_key(self, delay=0):
        if self.keys == 0 and self.pointer is not None:
            callback, param = self.callbacks["depth"]
            callback(cv2.EVENT_MOUSEMOVE, *self.pointer, 0, param)
        self.keys += 1
        return -1

    def destroy_all_windows(self):
        self.destroyed += 1

    def images(self, name, frame=None):
        return [
            image
            for index, window, image in self.shown
            if window == name and (frame is None or index == frame)
        ]


@pytest.fixture
def highgui(monkeypatch):
    gui = FakeHighGui()
    monkeypatch.setattr(cv2, "namedWindow", gui.named_window)
    monkeypatch.setattr(cv2, "setMouseCallback", gui.set_mouse_callback)
    monkeypatch.setattr(cv2, "imshow", gui.imshow)
    monkeypatch.setattr(cv2, "waitKey", gui.wait_key)
    monkeypatch.setattr(cv2, "destroyAllWindows", gui.destroy_all_windows)
    return gui


def run(num_frames: int = 2, renderer: NeighborhoodRendererConfig | None = None):
    camera = SyntheticDepthCameraConfig(
        width=64, height=48, realtime=False, invalid_fraction=0.0, seed=0
    )
    manager = Manager()
    manager.run(
        setup=partial(setup, camera=camera, radius=3, renderer=renderer),
        loop=partial(loop, cell_size=80, show_stereo=True, num_frames=num_frames),
        cleanup=cleanup,
    )
    return manager


def test_windows_and_mouse_callback(highgui):
    manager = run()

    assert highgui.windows == ["frame", "depth", "region"]
    callback, param = highgui.callbacks["depth"]
    assert param is manager.components["selector"]


def test_region_window_appears_after_pointer_move(highgui):
    run()

    assert highgui.keys == 2
    assert len(highgui.images("frame")) == 2
    assert len(highgui.images("depth")) == 2

    # No pointer event has arrived during the first frame
    assert highgui.images("region", frame=0) == []

    (grid,) = highgui.images("region", frame=1)
    assert grid.shape == (560, 560, 3)
    assert grid.dtype == np.uint8


def test_stereo_frame_is_side_by_side(highgui):
    run(num_frames=1)

    (frame,) = highgui.images("frame")
    assert frame.shape[:2] == (48, 128)


def test_depth_is_annotated_before_display(highgui):
    run()

    (before,) = highgui.images("depth", frame=0)
    (after,) = highgui.images("depth", frame=1)

    # Hover outline of radius 3 around (30, 20) runs along y = 16
    assert before[16, 30] != 0
    assert after[16, 30] == 0
    assert after[20, 30] != 0


def test_renderer_config_reaches_the_tool(highgui):
    run(renderer=NeighborhoodRendererConfig(hover_depth_value=4321))

    (after,) = highgui.images("depth", frame=1)
    assert after[16, 30] == 4321


def test_stops_after_num_frames_and_cleans_up(highgui):
    manager = run(num_frames=3)

    assert highgui.keys == 3
    assert highgui.destroyed == 1
    assert not manager.components["camera"].is_started

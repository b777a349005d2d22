"""Base class for depth cameras.

A depth camera streams synchronized frame sets. Each set holds one frame per enabled
:class:`StreamChannel`:

.. code-block:: python

    camera.start()
    while True:
        camera.wait_for_frames()
        depth = camera.get_frame(StreamChannel.DEPTH)
    camera.stop()
"""

from abc import abstractmethod
from enum import Enum

import numpy as np

from depth_inspector.drivers.sensor import Sensor, SensorConfig
from depth_inspector.utils import config_wrapper

FrameSet = dict["StreamChannel", np.ndarray]


class StreamChannel(Enum):
    """The streams a depth camera may provide."""

    LEFT = "left"
    RIGHT = "right"
    DEPTH = "depth"
    COLOR = "color"


@config_wrapper
class DepthCameraConfig(SensorConfig):
    """
    Configuration for depth cameras.

    Attributes:
        width (int): Stream width in pixels.
        height (int): Stream height in pixels.
        fps (int): Requested frame rate.
        start_on_create (bool): Start streaming when the camera is created. Otherwise
            :meth:`DepthCamera.start` is called by the first
            :meth:`DepthCamera.wait_for_frames`.
    """

    width: int = 640
    height: int = 480
    fps: int = 30
    start_on_create: bool = True


class DepthCamera[T: DepthCameraConfig](Sensor[T]):
    """
    Abstract base class for depth cameras. Subclasses implement the session
    (:meth:`_start`, :meth:`_stop`) and the blocking :meth:`_wait_for_frames`; the
    base class caches the most recent frame set for per-channel retrieval.
    """

    def __init__(self, config: T):
        super().__init__(config)
        self._started = False
        self._frames: FrameSet = {}

    @property
    @abstractmethod
    def channels(self) -> tuple[StreamChannel, ...]:
        """The channels present in every frame set."""
        pass

    @abstractmethod
    def _start(self) -> None:
        pass

    @abstractmethod
    def _stop(self) -> None:
        pass

    @abstractmethod
    def _wait_for_frames(self) -> FrameSet:
        pass

    def start(self) -> None:
        """Starts the streaming session. Does nothing if already started."""
        if self._started:
            return
        self._start()
        self._started = True

    def stop(self) -> None:
        """Stops the streaming session. Does nothing if not started."""
        if not self._started:
            return
        self._stop()
        self._started = False
        self._frames = {}

    def wait_for_frames(self) -> FrameSet:
        """Blocks until the next synchronized frame set arrives.

        Returns:
            FrameSet: The frames, keyed by channel. The set is also kept for
            :meth:`get_frame` until the next call.
        """
        if not self._started:
            self.start()
        self._frames = self._wait_for_frames()
        return self._frames

    def get_frame(self, channel: StreamChannel) -> np.ndarray | None:
        """Returns the frame of ``channel`` from the last frame set, if any."""
        return self._frames.get(channel)

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def resolution(self) -> tuple[int, int]:
        """The ``(width, height)`` of the streams."""
        return (self.config.width, self.config.height)

    def close(self) -> None:
        """Stops the session. Safe to call more than once."""
        self.stop()

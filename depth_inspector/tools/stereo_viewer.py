"""Tool to view the left and right streams of a depth camera side by side."""

import cv2

from depth_inspector.drivers import DepthCamera, DepthCameraConfig, StreamChannel
from depth_inspector.tools.display import WINDOW_FLAGS, is_exit_key, side_by_side
from depth_inspector.utils import Manager, get_logger, register_cli, run_cli

FRAME_WINDOW = "frame"


@register_cli
def stereo_viewer(camera: DepthCameraConfig, num_frames: int = -1):
    def setup(manager: Manager):
        _camera = DepthCamera.create_from_config(camera)
        manager.add(camera=_camera)
        cv2.namedWindow(FRAME_WINDOW, WINDOW_FLAGS)

    def loop(iter: int, manager: Manager, camera: DepthCamera) -> bool:
        if num_frames != -1 and iter >= num_frames:
            get_logger().info(f"Finished showing {num_frames} frames.")
            return False

        camera.wait_for_frames()
        left = camera.get_frame(StreamChannel.LEFT)
        right = camera.get_frame(StreamChannel.RIGHT)
        if left is not None and right is not None:
            cv2.imshow(FRAME_WINDOW, side_by_side(left, right))

        return not is_exit_key(cv2.waitKey(1))

    def cleanup(manager: Manager, camera: DepthCamera):
        cv2.destroyAllWindows()

    with Manager() as manager:
        manager.run(setup=setup, loop=loop, cleanup=cleanup)


if __name__ == "__main__":
    run_cli(stereo_viewer)

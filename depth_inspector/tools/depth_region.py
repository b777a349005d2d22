"""Tool to inspect raw depth values around the mouse pointer.

Three windows are shown: ``frame`` with the left and right streams side by side,
``depth`` with the depth stream and the inspected region outlined, and ``region`` with
the raw depth values of the region. Move the mouse over ``depth`` to inspect; click to
pin the region, click inside it again to release it. Quit with ESC or Q.

Note that the outline is drawn into the depth frame itself, so the depth values under
it are overwritten in the ``depth`` window.
"""

from functools import partial

import cv2

from depth_inspector.algos import (
    NeighborhoodRenderer,
    NeighborhoodRendererConfig,
    RegionSelector,
    depth_caption,
)
from depth_inspector.drivers import DepthCamera, DepthCameraConfig, StreamChannel
from depth_inspector.tools.display import (
    WINDOW_FLAGS,
    is_exit_key,
    on_mouse,
    side_by_side,
)
from depth_inspector.utils import Manager, get_logger, register_cli, run_cli

FRAME_WINDOW = "frame"
DEPTH_WINDOW = "depth"
REGION_WINDOW = "region"


def setup(
    manager: Manager,
    camera: DepthCameraConfig,
    radius: int,
    renderer: NeighborhoodRendererConfig | None = None,
):
    _camera = DepthCamera.create_from_config(camera)
    manager.add(camera=_camera)

    selector = RegionSelector(radius)
    manager.add(selector=selector, renderer=NeighborhoodRenderer(renderer))

    for window in (FRAME_WINDOW, DEPTH_WINDOW, REGION_WINDOW):
        cv2.namedWindow(window, WINDOW_FLAGS)
    cv2.setMouseCallback(DEPTH_WINDOW, on_mouse, selector)
    get_logger().info(f"Inspecting depth with radius {radius}. Press ESC or Q to quit.")


def loop(
    iter: int,
    manager: Manager,
    camera: DepthCamera,
    selector: RegionSelector,
    renderer: NeighborhoodRenderer,
    cell_size: int,
    show_stereo: bool,
    num_frames: int,
) -> bool:
    if num_frames != -1 and iter >= num_frames:
        get_logger().info(f"Finished showing {num_frames} frames.")
        return False

    camera.wait_for_frames()

    if show_stereo:
        left = camera.get_frame(StreamChannel.LEFT)
        right = camera.get_frame(StreamChannel.RIGHT)
        if left is not None and right is not None:
            cv2.imshow(FRAME_WINDOW, side_by_side(left, right))

    depth = camera.get_frame(StreamChannel.DEPTH)
    if depth is not None and depth.size > 0:
        state = selector.state
        renderer.annotate(depth, state)
        cv2.imshow(DEPTH_WINDOW, depth)

        grid = renderer.render_grid(depth, state, cell_size, caption=depth_caption)
        if grid is not None:
            cv2.imshow(REGION_WINDOW, grid)

    return not is_exit_key(cv2.waitKey(1))


def cleanup(manager: Manager, camera: DepthCamera, **_):
    camera.stop()
    cv2.destroyAllWindows()


@register_cli
def depth_region(
    camera: DepthCameraConfig,
    radius: int = 3,
    cell_size: int = 80,
    show_stereo: bool = True,
    num_frames: int = -1,
    renderer: NeighborhoodRendererConfig | None = None,
):
    """Runs the depth region inspector.

    Args:
        camera (DepthCameraConfig): The depth camera to stream from.
        radius (int): Half-width of the inspected region, in pixels.
        cell_size (int): Side length of one cell of the region window, in pixels.
        show_stereo (bool): Also show the left and right streams.
        num_frames (int): Stop after this many frames. -1 runs until quit.
        renderer (NeighborhoodRendererConfig | None): Options for the region window and
            the outline. Defaults are used when None.
    """
    with Manager() as manager:
        manager.run(
            setup=partial(setup, camera=camera, radius=radius, renderer=renderer),
            loop=partial(
                loop,
                cell_size=cell_size,
                show_stereo=show_stereo,
                num_frames=num_frames,
            ),
            cleanup=cleanup,
        )


if __name__ == "__main__":
    run_cli(depth_region)

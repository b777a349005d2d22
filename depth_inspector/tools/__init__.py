"""Command line interface for the depth_inspector.tools package."""

from depth_inspector.utils import Registry

# =============================================================================


class ToolRegistry(Registry):
    pass


ToolRegistry.register("depth_region", f"{__name__}.depth_region")
ToolRegistry.register("stereo_viewer", f"{__name__}.stereo_viewer")

# =============================================================================


def main():
    import argparse
    import sys

    from depth_inspector.utils import get_logger, run_cli

    parser = argparse.ArgumentParser(description="depth_inspector tools", add_help=False)

    parser.add_argument(
        "cmd",
        help="The command to run",
        choices=list(ToolRegistry.registry.keys()),
    )

    known_args, unknown_args = parser.parse_known_args()

    # Remove known args from argv
    sys.argv = sys.argv[:1] + unknown_args

    get_logger().info(f"Running command: {known_args.cmd}")
    run_cli(ToolRegistry.registry[known_args.cmd])

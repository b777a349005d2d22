# flake8: noqa
from hydra_config import config_wrapper, register_cli, run_cli

from depth_inspector.utils.logger import get_logger
from depth_inspector.utils.manager import Component, Config, Manager
from depth_inspector.utils.misc import classproperty, get_object
from depth_inspector.utils.registry import Registry, register

__all__ = [
    # hydra_config
    "config_wrapper",
    "register_cli",
    "run_cli",
    # manager
    "Component",
    "Config",
    "Manager",
    # logger
    "get_logger",
    # registry
    "Registry",
    "register",
    # misc
    "classproperty",
    "get_object",
]

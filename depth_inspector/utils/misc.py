"""Miscellaneous utility functions/classes."""

from importlib import import_module
from types import ModuleType
from typing import Any


class classproperty:
    def __init__(self, func):
        self.fget = func

    def __get__(self, instance, owner):
        return self.fget(owner)


def get_object(path: str) -> Any:
    """Resolve a dotted path such as ``depth_inspector.drivers.synthetic.SyntheticDepthCamera``.

    Modules are imported as needed while walking the path front to back.

    Raises:
        ImportError: If any part of the path cannot be imported or found.
    """
    parts = path.split(".")
    if not path or not all(parts):
        raise ImportError(f"Invalid dotted path '{path}'.")

    obj = import_module(parts[0])
    for m, part in enumerate(parts[1:], start=1):
        try:
            obj = getattr(obj, part)
            continue
        except AttributeError as exc_attr:
            if not isinstance(obj, ModuleType):
                raise ImportError(
                    f"'{part}' is not an attribute of '{'.'.join(parts[:m])}'"
                ) from exc_attr
        obj = import_module(".".join(parts[: m + 1]))
    return obj

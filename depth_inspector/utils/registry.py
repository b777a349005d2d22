"""
A base Registry class to register and instantiate classes by name.

Example:
    from depth_inspector.utils.registry import Registry, register

    class Driver(Registry):
        pass

    @register
    class FakeDriver(Driver):
        def __init__(self, value):
            self.value = value

    driver = Driver.create_from_registry("FakeDriver", 3)

    # Register lazily, importing the class from its module
    Driver.register("OtherDriver", "path.to.module")
"""

from typing import Any, Self

from depth_inspector.utils.logger import get_logger
from depth_inspector.utils.misc import classproperty, get_object


class Registry:
    """Base class providing a per-class registry of subclasses, plus a factory.

    A registered class can also be associated with a 'friend' class, which is how a
    config class knows which component it builds:

        DepthCameraConfig.register(
            "SyntheticDepthCameraConfig", module, "SyntheticDepthCamera"
        )
        cfg.create_from_registry(config=cfg)  # -> SyntheticDepthCamera
    """

    _registry: dict[str, dict[str, type]] = {}

    @classmethod
    def register(
        cls,
        class_type: type | str,
        module_path: str | None = None,
        friend: str | None = None,
    ) -> type | None:
        """
        Registers a class in this registry.

        Args:
            class_type (type | str): A class object, or a class name to import from
                ``module_path``.
            module_path (str | None): Module to import ``class_type`` from when it is
                given by name.
            friend (str | None): Name of a class in ``module_path`` to associate with
                the (already registered) ``class_type``.

        Returns:
            type | None: The registered class, or None if it could not be imported.
        """
        if isinstance(class_type, str):
            assert module_path is not None, "module_path is required for lazy loading."
            try:
                class_type = get_object(f"{module_path}.{class_type}")
            except ImportError as e:
                get_logger().debug(f"Failed to import {class_type}: {e}")
                return None

        name = class_type.__name__
        if friend is None:
            cls.registry[name] = class_type
            return class_type

        assert name in cls.registry, (
            f"Class '{name}' must be registered before associating with "
            f"friend '{friend}'."
        )
        cls.registry[name].register(friend, module_path)
        return class_type

    @classmethod
    def create_from_registry(cls, name: str | None = None, *args: Any, **kwargs: Any) -> Self | Any:
        """
        Creates an instance of a registered class.

        Args:
            name (str | None): The class to instantiate. May be None when exactly one
                class is registered.
            *args (Any): Positional arguments for the constructor.
            **kwargs (Any): Keyword arguments for the constructor.
        """
        if len(cls.registry) == 0:
            raise ValueError(f"No class registered with {cls.__name__}.")

        if name is None:
            if len(cls.registry) > 1:
                raise ValueError(
                    f"Multiple classes registered with {cls.__name__}. "
                    "Must specify a name."
                )
            name = next(iter(cls.registry))

        class_type = cls.registry.get(name)
        if class_type is None:
            raise ValueError(f"Class '{name}' not found in {cls.__name__}'s registry.")
        return class_type(*args, **kwargs)

    @classproperty
    def registry(cls) -> dict[str, type]:
        """The registry of this exact class, keyed by class name."""
        return cls._registry.setdefault(cls.__name__, {})


def register(class_type):
    """
    Decorator registering a class with every Registry-based ancestor.

    Args:
        class_type: The class to register.

    Returns:
        The registered class.
    """

    def register_with_bases(cls: type):
        for base in cls.__bases__:
            if issubclass(base, Registry) and base is not Registry:
                base.register(class_type)
                register_with_bases(base)

    register_with_bases(class_type)
    return class_type

"""Components which must be closed, and a manager that runs them frame by frame.

The manager can be used as a context manager or run with a setup, loop, and cleanup
function. The manager will ensure all components are properly closed when it is closed.

Example:

.. code-block:: python

    from depth_inspector.utils.manager import Manager

    def setup(manager):
        manager.add(camera=DepthCamera.create_from_config(config))

    def loop(i, manager, camera):
        camera.wait_for_frames()
        return i < 100

    with Manager() as manager:
        manager.run(setup=setup, loop=loop)
"""

from abc import ABC, abstractmethod
from functools import partial
from typing import Any, Callable, Self

from hydra_config import HydraContainerConfig, config_wrapper

from depth_inspector.utils.logger import get_logger
from depth_inspector.utils.registry import Registry


@config_wrapper
class Config(ABC, HydraContainerConfig, Registry):
    """Base configuration class for depth_inspector components."""

    pass


class Component[T: Config](ABC, Registry):
    """Base class for components which must be closed."""

    def __init__(self, config: T):
        self._config = config

    @property
    def config(self) -> T:
        """Retrieves the component configuration."""
        return self._config

    @classmethod
    def create_from_config(cls, config: T, **kwargs) -> Self:
        """Create an instance of the component associated with a configuration.

        Args:
            config (T): The configuration object. Its class must have been registered
                with the component class as a friend.

        Returns:
            Self: An instance of the class.
        """
        return config.create_from_registry(config=config, **kwargs)

    @abstractmethod
    def close(self) -> None:
        """Closes the component and releases any resources."""
        ...

    @property
    @abstractmethod
    def is_okay(self) -> bool:
        """Checks if the component is operational."""
        ...

    def __del__(self):
        """Ensures the component is closed when it is deleted."""
        try:
            self.close()
        except Exception:
            get_logger().exception(f"Failed to close {self.__class__.__name__}.")


class Manager:
    """This is a manager for handling components which must be closed. It is
    essentially just a context manager which calls close on all components when
    it is closed.
    """

    def __init__(
        self,
        *,
        cleanup_on_keyboard_interrupt: bool = True,
        **components: type[Component] | Component | Any,
    ):
        self._components: dict[str, type[Component] | Component | Any] = components
        self._cleanup_on_keyboard_interrupt = cleanup_on_keyboard_interrupt

        self._iter = 0
        self._closed = False
        self._looping = False

    def add(self, **components: Component | Any):
        """Adds additional components to the manager."""
        self._components.update(components)

    def run(
        self,
        iter: int = 0,
        *,
        setup: Callable[..., bool | None] | None = None,
        loop: Callable[..., bool | None] | None = None,
        cleanup: Callable[..., None] | None = None,
    ) -> None:
        """Runs a setup function, then a loop function while all components are okay.

        Args:
            iter (int, optional): Iteration counter. Defaults to 0.

        Keyword Args:
            setup (Callable[..., bool | None] | None, optional): Called once with the
                manager and the components as keyword arguments. Returning False
                stops the run.
            loop (Callable[..., bool | None] | None, optional): Called with the
                iteration counter, the manager and the components. Returning False
                stops the loop and begins cleanup.
            cleanup (Callable[..., None] | None, optional): Called once after the
                loop with the manager and the components.
        """
        self._iter = iter

        setup = setup or (lambda **_: None)
        loop = loop or (lambda *_, **__: None)
        cleanup = cleanup or (lambda **_: None)

        try:
            # SETUP
            try:
                if setup(manager=self, **self._components) is False:
                    get_logger().info("Setup failed, exiting...")
                    return
            except Exception:
                get_logger().exception("Failed to setup components.")
                return

            # LOOP
            self._looping = True
            try:
                while self.is_okay:
                    if loop(self._iter, manager=self, **self._components) is False:
                        get_logger().info(
                            f"Exiting loop after {self._iter + 1} iterations."
                        )
                        break

                    self._iter += 1
            except KeyboardInterrupt:
                if not self._cleanup_on_keyboard_interrupt:
                    get_logger().info("Exiting loop.")
                    return
            except Exception as e:
                get_logger().exception(f"Failed to run loop {self._iter}: {e}")
                return
            finally:
                self._looping = False

            # CLEANUP
            try:
                get_logger().info("Cleaning up...")
                cleanup(manager=self, **self._components)
            except Exception:
                get_logger().exception("Failed to cleanup components.")
        finally:
            self.close()

    def __enter__(self):
        """Allows this class to be used as a context manager."""
        # Components passed as types or partials are created on entry
        for name, component in self._components.items():
            if not isinstance(component, (type, partial)):
                continue

            try:
                self._components[name] = component()
            except Exception:
                get_logger().exception(f"Failed to create component {name}.")
                self.close()
                raise

        return self

    def __exit__(self, *_, **__):
        """Ensures each component is properly closed when used as a context manager."""
        self.close()

    @property
    def iter(self) -> int:
        """The current iteration counter."""
        return self._iter

    @property
    def components(self) -> dict[str, type[Component] | Component | Any]:
        """Returns a dictionary of components."""
        return self._components

    @property
    def is_looping(self) -> bool:
        """Checks if the manager is currently looping."""
        return self._looping

    @property
    def is_okay(self) -> bool:
        """Checks if all components are okay."""
        for name, component in self._components.items():
            if not isinstance(component, Component):
                continue

            if not component.is_okay:
                get_logger().error(f"Component {name} is not okay.")
                return False
        return True

    def close(self):
        """Closes all components."""
        if self._closed:
            return

        for name, component in self._components.items():
            if not isinstance(component, Component):
                continue

            get_logger().info(f"Closing {name}...")
            try:
                component.close()
            except Exception as e:
                get_logger().exception(
                    f"Failed to close {name} ({component.__class__.__name__}): {e}"
                )

        self._closed = True

"""Base classes for sensors."""

from abc import abstractmethod

from depth_inspector.utils import Component, Config, config_wrapper


@config_wrapper
class SensorConfig(Config):
    """Configuration for sensors.

    When defining a new sensor, create a subclass of this configuration class
    and add any necessary parameters.
    """

    pass


class Sensor[T: SensorConfig](Component[T]):
    """Abstract base class for sensors.

    Args:
        config (SensorConfig): The sensor configuration.
    """

    def __init__(self, config: T):
        super().__init__(config)

    @property
    @abstractmethod
    def is_okay(self) -> bool:
        """Checks if the sensor is operational."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Closes the sensor and releases any resources."""
        pass

from enum import IntEnum
from typing import Callable, Optional

from motion_view.sensors import MotionSample

__doc__ = """Contract of the platform motion service."""


class SensorUnavailable(Exception):
    """The platform has no usable motion sensor."""


class SampleError(Exception):
    """A single sample could not be delivered."""


class ReferenceFrame(IntEnum):
    """Coordinate convention of the orientation quaternion.

    Values are the ones written to the motion peripheral."""

    X_ARBITRARY_Z_VERTICAL = 1
    X_ARBITRARY_CORRECTED_Z_VERTICAL = 2
    X_MAGNETIC_NORTH_Z_VERTICAL = 4
    X_TRUE_NORTH_Z_VERTICAL = 8


MotionHandler = Callable[[Optional[MotionSample], Optional[SampleError]], None]


class MotionManager:
    """Base class of motion services.

    Subclasses deliver fused samples by calling the handler given to
    start_device_motion_updates, either as handler(sample, None) or
    handler(None, error). The handler may be called from any thread."""

    def __init__(self):
        self.device_motion_update_interval = 0.1

    @property
    def device_motion_available(self) -> bool:
        """Whether fused device motion can be sampled at all."""
        raise NotImplementedError

    @property
    def device_motion_active(self) -> bool:
        """Whether periodic updates are currently registered."""
        raise NotImplementedError

    def start_device_motion_updates(
        self, reference_frame: ReferenceFrame, handler: MotionHandler
    ):
        """Start periodic updates at device_motion_update_interval.

        Raises SensorUnavailable if the sensor cannot be reached."""
        raise NotImplementedError

    def stop_device_motion_updates(self):
        """Cancel periodic updates. Safe to call when not started."""
        raise NotImplementedError

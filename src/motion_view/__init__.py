from motion_view.sensors import (
    Acceleration,
    MagneticField,
    MotionSample,
    Quaternion,
    RotationRate,
)
from motion_view.manager import (
    MotionManager,
    ReferenceFrame,
    SampleError,
    SensorUnavailable,
)
from motion_view.state import MotionState
from motion_view.motion_source import MotionSource
from motion_view.render import Color, DisplayRenderer, Line

__version__ = "0.1.0"

__doc__ = """Live fused motion readout.

Subscribes to a motion service (by default a Bluetooth LE motion peripheral)
and shows acceleration, rotation rate, magnetic field and the orientation
quaternion as text, refreshed at a fixed interval."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from motion_view.sensors import MotionSample, Quaternion

__doc__ = """Formatting motion samples as display lines."""


class Color(Enum):
    """Display color of a line. Cosmetic only."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    CYAN = "cyan"


@dataclass(frozen=True)
class Line:
    text: str
    color: Optional[Color] = None


# Placeholders for a stationary, level device without a heading
SIMULATOR_LINES = (
    Line("Accel: [0.0, 0.0, 1.0] g"),
    Line("Gyro: [0, 0, 0] rads/sec"),
    Line("Mag: [0, 0, 0] uT"),
    Line("Q: [1, 0, 0, 0]"),
)


def format_vector(label: str, vector) -> str:
    """Format an (x, y, z) vector with fixed-width fields."""
    return label + ": [%6.3f, %6.3f, %6.3f]" % (vector.x, vector.y, vector.z)


def format_quaternion(quaternion: Quaternion) -> str:
    """Format a quaternion in (w, x, y, z) order."""
    return "Q[w,x,y,z]: [%6.3f, %6.3f, %6.3f, %6.3f]" % (
        quaternion.w,
        quaternion.x,
        quaternion.y,
        quaternion.z,
    )


class DisplayRenderer:
    """Turns a MotionSample into the fixed sequence of screen lines.

    With simulator=True the sample is ignored and placeholder values are shown
    instead, for environments without physical sensors."""

    def __init__(self, simulator: bool = False):
        self._simulator = simulator

    @property
    def simulator(self) -> bool:
        return self._simulator

    def render(self, sample: MotionSample) -> Tuple[Line, ...]:
        if self._simulator:
            return SIMULATOR_LINES

        return (
            Line(format_vector("Accel[g]", sample.acceleration), Color.RED),
            Line(format_vector("Gyro[rps]", sample.rotation_rate), Color.GREEN),
            Line(format_vector("Mag[uT]", sample.magnetic_field), Color.BLUE),
            Line(format_quaternion(sample.orientation), Color.CYAN),
        )

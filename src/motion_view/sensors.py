from dataclasses import dataclass, field
from typing import Optional

__doc__ = """Immutable per-sample motion values."""


@dataclass(frozen=True)
class Acceleration:
    """User acceleration in g, gravity removed."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class RotationRate:
    """Angular velocity in radians per second."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class MagneticField:
    """Ambient magnetic field in microtesla."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    """Orientation quaternion. The provider is expected to deliver unit
    quaternions; nothing here normalizes them."""

    w: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def norm_squared(self) -> float:
        return self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z


@dataclass(frozen=True)
class MotionSample:
    """A frozen container for one fused motion reading.

    The four vectors always come from the same instant; a sample is replaced
    as a whole, never field by field."""

    acceleration: Acceleration = field(default_factory=Acceleration)
    rotation_rate: RotationRate = field(default_factory=RotationRate)
    magnetic_field: MagneticField = field(default_factory=MagneticField)
    orientation: Quaternion = field(default_factory=Quaternion)
    timestamp: Optional[int] = None

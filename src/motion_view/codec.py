import struct

from motion_view.manager import ReferenceFrame, SampleError
from motion_view.sensors import (
    Acceleration,
    MagneticField,
    MotionSample,
    Quaternion,
    RotationRate,
)

__doc__ = """Binary layout of motion peripheral characteristics.

A sample notification is little-endian: status byte, uint32 timestamp in
milliseconds, then 13 floats: acceleration xyz, rotation rate xyz, magnetic
field xyz and orientation wxyz. A nonzero status means the peripheral could
not produce the sample.

The configuration write is a uint16 interval in milliseconds followed by the
reference frame byte."""

SAMPLE_STRUCT = struct.Struct("<BI13f")
CONFIG_STRUCT = struct.Struct("<HB")

STATUS_OK = 0


def decode_sample(data) -> MotionSample:
    """Parse a sample notification. Raises SampleError on bad data."""
    data = bytes(data)
    if len(data) != SAMPLE_STRUCT.size:
        raise SampleError(
            f"Expected {SAMPLE_STRUCT.size} bytes of motion data, got {len(data)}"
        )

    status, timestamp, *values = SAMPLE_STRUCT.unpack(data)
    if status != STATUS_OK:
        raise SampleError(f"Peripheral reported sampling error {status}")

    return MotionSample(
        acceleration=Acceleration(*values[0:3]),
        rotation_rate=RotationRate(*values[3:6]),
        magnetic_field=MagneticField(*values[6:9]),
        orientation=Quaternion(*values[9:13]),
        timestamp=timestamp,
    )


def encode_sample(sample: MotionSample, status: int = STATUS_OK) -> bytes:
    """Inverse of decode_sample, for peripheral simulators and tests."""
    a, r, m, q = (
        sample.acceleration,
        sample.rotation_rate,
        sample.magnetic_field,
        sample.orientation,
    )
    return SAMPLE_STRUCT.pack(
        status,
        sample.timestamp or 0,
        a.x, a.y, a.z,
        r.x, r.y, r.z,
        m.x, m.y, m.z,
        q.w, q.x, q.y, q.z,
    )


def encode_config(interval: float, reference_frame: ReferenceFrame) -> bytes:
    """Sampling configuration. interval is in seconds."""
    interval_ms = min(max(int(round(interval * 1000)), 1), 0xFFFF)
    return CONFIG_STRUCT.pack(interval_ms, int(reference_frame))

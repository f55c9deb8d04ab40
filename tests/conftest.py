"""
Shared fixtures: a scriptable motion manager standing in for the platform
motion service.
"""

import pytest

from motion_view import (
    Acceleration,
    MagneticField,
    MotionManager,
    MotionSample,
    Quaternion,
    RotationRate,
)


class FakeMotionManager(MotionManager):
    """Records registrations and lets tests deliver samples by hand."""

    def __init__(self, available=True):
        super().__init__()
        self.available = available
        self.handler = None
        self.reference_frame = None
        self.start_calls = 0
        self.stop_calls = 0

    @property
    def device_motion_available(self):
        return self.available

    @property
    def device_motion_active(self):
        return self.handler is not None

    def start_device_motion_updates(self, reference_frame, handler):
        self.start_calls += 1
        self.reference_frame = reference_frame
        self.handler = handler

    def stop_device_motion_updates(self):
        self.stop_calls += 1
        self.handler = None

    def deliver(self, sample=None, error=None):
        self.handler(sample, error)


@pytest.fixture
def manager():
    return FakeMotionManager()


@pytest.fixture
def sample():
    return MotionSample(
        acceleration=Acceleration(0.125, -0.25, 0.5),
        rotation_rate=RotationRate(1.5, -0.75, 0.0),
        magnetic_field=MagneticField(22.5, -4.0, -41.25),
        orientation=Quaternion(0.5, 0.5, 0.5, 0.5),
        timestamp=1000,
    )


@pytest.fixture
def other_sample():
    return MotionSample(
        acceleration=Acceleration(0.0, 0.0, 0.0625),
        rotation_rate=RotationRate(0.0, 0.25, 0.0),
        magnetic_field=MagneticField(20.0, 1.0, -40.0),
        orientation=Quaternion(1.0, 0.0, 0.0, 0.0),
        timestamp=1100,
    )


@pytest.fixture
def manager_factory():
    """Builds fake motion managers, e.g. manager_factory(available=False)."""
    return FakeMotionManager

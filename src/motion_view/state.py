import threading
from typing import Callable, List

from motion_view.sensors import (
    Acceleration,
    MagneticField,
    MotionSample,
    Quaternion,
    RotationRate,
)

__doc__ = """Observable container for the most recent motion sample."""

Observer = Callable[[MotionSample], None]


class MotionState:
    """Holds the published motion sample and notifies observers on change.

    The sample is swapped as a single immutable object, so snapshot() never
    mixes vectors from two different readings. Observers are called on the
    publishing thread; a UI should hand the sample over to its own thread."""

    def __init__(self):
        self._lock = threading.Lock()
        self._sample = MotionSample()
        self._observers: List[Observer] = []

    @property
    def acceleration(self) -> Acceleration:
        return self.snapshot().acceleration

    @property
    def rotation_rate(self) -> RotationRate:
        return self.snapshot().rotation_rate

    @property
    def magnetic_field(self) -> MagneticField:
        return self.snapshot().magnetic_field

    @property
    def orientation(self) -> Quaternion:
        return self.snapshot().orientation

    def snapshot(self) -> MotionSample:
        """The current sample, with all four vectors from the same reading."""
        with self._lock:
            return self._sample

    def publish(self, sample: MotionSample):
        """Replace the current sample and notify every observer."""
        with self._lock:
            self._sample = sample
            observers = list(self._observers)

        for observer in observers:
            observer(sample)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register observer; returns a function that unregisters it."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe():
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

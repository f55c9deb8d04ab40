import logging
from typing import Optional

from motion_view.manager import (
    MotionManager,
    ReferenceFrame,
    SampleError,
    SensorUnavailable,
)
from motion_view.sensors import MotionSample
from motion_view.state import MotionState

logger = logging.getLogger(__name__)


__doc__ = """Subscribing to fused motion samples and republishing them."""


class MotionSource:
    """Requests fused motion samples from a MotionManager at a fixed interval
    and publishes each of them into a MotionState.

    Use MotionSource.start and MotionSource.stop, or the instance as a context
    manager, which stops the updates on every exit path."""

    def __init__(
        self,
        manager: MotionManager,
        state: Optional[MotionState] = None,
        interval: float = 0.1,
        reference_frame: ReferenceFrame = ReferenceFrame.X_MAGNETIC_NORTH_Z_VERTICAL,
    ):
        """Creates a new MotionSource. Does not start sampling.

        interval is in seconds. reference_frame decides what "north" means in
        the published orientation."""
        if interval <= 0:
            raise ValueError(f"Sampling interval must be positive, got {interval}")

        self._manager = manager
        self._state = state if state is not None else MotionState()
        self._interval = interval
        self._reference_frame = ReferenceFrame(reference_frame)
        self._running = False

    @property
    def state(self) -> MotionState:
        """The published motion state."""
        return self._state

    @property
    def interval(self) -> float:
        """Sampling interval in seconds."""
        return self._interval

    @property
    def reference_frame(self) -> ReferenceFrame:
        """Reference frame of the published orientation."""
        return self._reference_frame

    @property
    def running(self) -> bool:
        """Whether periodic updates are registered."""
        return self._running

    def start(self) -> bool:
        """Start periodic sampling.

        Returns False, after logging a warning, if motion sensing is not
        available. The published state then stays at its zero defaults."""
        if self._running:
            return True

        try:
            if not self._manager.device_motion_available:
                raise SensorUnavailable("Device motion data isn't available!")

            self._manager.device_motion_update_interval = self._interval
            self._manager.start_device_motion_updates(
                self._reference_frame, self._on_device_motion
            )
        except SensorUnavailable as e:
            logger.warning("%s", e)
            # Release whatever the availability check acquired
            self._manager.stop_device_motion_updates()
            return False

        self._running = True
        return True

    def stop(self):
        """Cancel periodic sampling. Does nothing if sampling is not running."""
        if not self._running:
            return
        self._running = False
        self._manager.stop_device_motion_updates()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc_info):
        self.stop()

    def _on_device_motion(
        self, sample: Optional[MotionSample], error: Optional[SampleError]
    ):
        if error is not None:
            logger.error("Discarding motion sample: %s", error)
            return

        if sample is None:
            return

        self._state.publish(sample)

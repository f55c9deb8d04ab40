from motion_view import DisplayRenderer, MotionSource, ReferenceFrame
from motion_view.ble_motion import BleMotionManager
from motion_view.screen import MotionScreen
import logging

# Log to a file so curses does not draw over the messages
logging.basicConfig(level=logging.INFO, filename="motion.log")

# Orientation relative to an arbitrary heading, sampled at 50 Hz

manager = BleMotionManager(name_filter="phone")
source = MotionSource(
    manager,
    interval=0.02,
    reference_frame=ReferenceFrame.X_ARBITRARY_CORRECTED_Z_VERTICAL,
)

MotionScreen(source, DisplayRenderer()).run()

from threading import Event

from motion_view import DisplayRenderer, MotionSource
from motion_view.ble_motion import BleMotionManager
import logging

# Get helpful log info
logging.basicConfig(level=logging.INFO)

# Print every sample instead of drawing a curses screen

renderer = DisplayRenderer()


def on_sample(sample):
    print("\t".join(line.text for line in renderer.render(sample)))


source = MotionSource(BleMotionManager())
source.state.subscribe(on_sample)

with source:
    if source.running:
        try:
            Event().wait()
        except KeyboardInterrupt:
            pass

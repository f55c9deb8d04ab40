import logging

from motion_view.ble_motion import BleMotionManager
from motion_view.config import MotionConfig
from motion_view.motion_source import MotionSource
from motion_view.render import DisplayRenderer
from motion_view.screen import MotionScreen

__doc__ = """Entry point wiring the BLE motion service to the terminal screen."""


def setup_logging(config: MotionConfig):
    # Log lines written to the terminal would be drawn over by curses
    logging.basicConfig(
        level=config.log_level,
        filename=config.log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_screen(config: MotionConfig) -> MotionScreen:
    manager = BleMotionManager(
        name_filter=config.device_name, scan_timeout=config.scan_timeout
    )
    source = MotionSource(
        manager, interval=config.interval, reference_frame=config.reference_frame
    )
    renderer = DisplayRenderer(simulator=config.simulator)
    return MotionScreen(source, renderer, poll_interval=config.interval / 2)


def main():
    config = MotionConfig.from_env()
    setup_logging(config)
    build_screen(config).run()


if __name__ == "__main__":
    main()

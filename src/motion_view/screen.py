import curses
import time
from queue import Empty, Queue

from motion_view.motion_source import MotionSource
from motion_view.render import Color, DisplayRenderer

__doc__ = """Terminal screen showing the live motion readout."""

CURSES_COLORS = {
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.BLUE: curses.COLOR_BLUE,
    Color.CYAN: curses.COLOR_CYAN,
}

TITLE = "Motion (press q to quit)"


class MotionScreen:
    """Draws the renderer's lines with curses and redraws whenever the
    source publishes a new sample.

    Samples arrive on the motion service's thread and are queued; drawing only
    happens on the thread that called MotionScreen.run. Sampling is stopped
    when the screen is closed, however it is closed."""

    def __init__(self, source: MotionSource, renderer: DisplayRenderer, poll_interval=0.05):
        self._source = source
        self._renderer = renderer
        self._poll_interval = poll_interval
        self._updates = Queue()
        self._attributes = {}

    def run(self):
        """Blocking UI loop. Returns when q is pressed or on Ctrl-C."""
        try:
            curses.wrapper(self._main)
        except KeyboardInterrupt:
            pass

    def _main(self, stdscr):
        try:
            curses.curs_set(0)
        except curses.error:
            # Terminal cannot hide the cursor
            pass
        stdscr.nodelay(True)
        self._attributes = self._init_colors()

        self._draw(stdscr, self._source.state.snapshot())

        unsubscribe = self._source.state.subscribe(self._updates.put)
        try:
            with self._source:
                self._loop(stdscr)
        finally:
            unsubscribe()

    def _loop(self, stdscr):
        while True:
            key = stdscr.getch()
            if key in (ord("q"), ord("Q")):
                break

            if (sample := self._latest_update()) is not None:
                self._draw(stdscr, sample)

            time.sleep(self._poll_interval)

    def _latest_update(self):
        sample = None
        while True:
            try:
                sample = self._updates.get(block=False)
            except Empty:
                return sample

    @staticmethod
    def _init_colors():
        if not curses.has_colors():
            return {}

        curses.start_color()
        curses.use_default_colors()
        attributes = {}
        for pair_number, (color, curses_color) in enumerate(CURSES_COLORS.items(), 1):
            curses.init_pair(pair_number, curses_color, -1)
            attributes[color] = curses.color_pair(pair_number)
        return attributes

    def _draw(self, stdscr, sample):
        stdscr.erase()
        stdscr.addstr(0, 0, TITLE, curses.A_BOLD)
        for row, line in enumerate(self._renderer.render(sample), 2):
            stdscr.addstr(row, 2, line.text, self._attributes.get(line.color, curses.A_NORMAL))
        stdscr.refresh()

import sys
import click

from threading import Event, Thread
from time import time


class TimingLogger:

    def __init__(self, logger):
        self.last_message_time = time()
        self.logger = logger

    def log(self, msg):
        time_elapsed = time() - self.last_message_time
        unit = 's'
        if time_elapsed < 1:
            for myunit in ['ms', 'us', 'ns']:
                if time_elapsed < 1:
                    time_elapsed *= 1000
                    unit = myunit
        elif time_elapsed > 3600:
            time_elapsed /= 3600
            unit = 'h'
        elif time_elapsed > 60:
            time_elapsed /= 60
            unit = 'm'
        msg = f'[{time_elapsed:.4}{unit}] {msg}'
        self.logger(msg)
        self.last_message_time = time()


class Spinner:
    """Show which n is being computed on a terminal line.

    Workers call `update`, which only records the value. A daemon thread
    redraws the line every `interval` seconds, so a slow terminal never
    holds up a computation or the results.
    """

    FRAMES = '|/-\\'

    def __init__(self, interval=0.12, stream=None):
        self.interval = interval
        self.stream = stream if stream is not None else sys.stderr
        self.current = None
        self._stop = Event()
        self._thread = None

    def update(self, n):
        self.current = n

    def _draw(self, frame):
        current = self.current
        if current is None:
            return
        click.echo(f'\r{frame} computing {current}...', file=self.stream, nl=False)

    def _spin(self):
        tick = 0
        while not self._stop.wait(self.interval):
            self._draw(self.FRAMES[tick % len(self.FRAMES)])
            tick += 1

    def start(self):
        if self._thread is None:
            self._stop.clear()
            self._thread = Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def stop(self):
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        if self.current is not None:
            click.echo('\r\033[K', file=self.stream, nl=False)

    def __enter__(self):
        return self.start()

    def __exit__(self, *exc):
        self.stop()
        return False

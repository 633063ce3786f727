import time

from rich.console import Console

def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000

def set_clock(clock_=_wall_clock_ms, /):
    """Sets the clock used to timestamp votes created without one.

    Defaults to the wall clock, in milliseconds since the epoch.
    Can be passed any callable taking no argument and returning an int.
    """
    global _clock
    _clock = clock_

def clock() -> int:
    """Returns the current time according to the configured clock."""
    return _clock()

def set_console(console_=None, /):
    """Sets the console on which listeners and the service report.

    Defaults to a new rich Console writing to stdout. Passing a Console
    writing to a file or a StringIO is the way to silence or capture the
    diagnostics.
    """
    global console
    if console_ is None:
        console_ = Console()
    console = console_

set_clock()
set_console()

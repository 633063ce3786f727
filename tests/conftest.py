import io

import pytest
from rich.console import Console

from ballotbox import _settings

@pytest.fixture(autouse=True)
def console_output():
    """Routes the console diagnostics to a buffer, returned to the test."""
    buffer = io.StringIO()
    previous = _settings.console
    _settings.set_console(Console(file=buffer, width=500, color_system=None))
    yield buffer
    _settings.set_console(previous)

@pytest.fixture
def fixed_clock():
    _settings.set_clock(lambda: 1_700_000_000_000)
    yield 1_700_000_000_000
    _settings.set_clock()

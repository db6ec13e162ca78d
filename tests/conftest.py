"""
Global pytest configuration and fixtures.
"""

import pytest

from wordwheel.communication.presenter import Presenter
from tests.helpers.io_fakes import RecordingOutput, ZERO_PACING


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def presenter(output):
    """Presenter with all delays disabled."""
    return Presenter(output, pacing=ZERO_PACING)

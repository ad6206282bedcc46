"""Shared fixtures for gesture tests."""

import pytest

from touch_gestures import TouchElement
from touch_helpers import CallRecorder, FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def element():
    return TouchElement('test-element')


@pytest.fixture
def calls():
    return CallRecorder()

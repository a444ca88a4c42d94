"""Shared Pytest Fixtures for the mocks.

The fixtures in this file provide:
- A fresh `ExpectationTracker` per test.
- Pairs of mock handles derived from that tracker.
- The three packets used by the send/receive scenarios.
"""

import pytest

from ross_mock import ExpectationTracker, Packet


@pytest.fixture
def tracker():
    """Provides an empty tracker."""
    return ExpectationTracker()


@pytest.fixture
def first_mock(tracker):
    """Provides the first handle derived from `tracker` (index 0)."""
    return tracker.create_mock()


@pytest.fixture
def second_mock(tracker, first_mock):
    """Provides the second handle derived from `tracker` (index 1).

    Depends on `first_mock` so that the indices are always allocated in the
    same order.
    """
    return tracker.create_mock()


@pytest.fixture
def packet_1111():
    return Packet(is_error=True, device_address=0x1111, data=[0x11, 0x11, 0x11])


@pytest.fixture
def packet_2222():
    return Packet(is_error=False, device_address=0x2222, data=[0x22, 0x22, 0x22])


@pytest.fixture
def packet_3333():
    return Packet(is_error=True, device_address=0x3333, data=[0x33, 0x33, 0x33])

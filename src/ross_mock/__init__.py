"""Deterministic mocks for pins and packet interfaces.

This package provides test doubles for code written against digital input
pins, digital output pins and a packet-oriented protocol interface. Every
interaction the code under test performs is checked against a script of
expectations declared up front, in order, and any divergence fails the test
immediately.

Key Components:
- Tracker-based mocks:
    - ExpectationTracker: One ordered script shared by any number of mocks.
    - Mock: An owner-indexed handle that satisfies every capability contract.
- Standalone mocks, each with its own queue:
    - InputPinMock, OutputPinMock, InterfaceMock, and their base GenericMock.
- Expectations:
    - InputPinExpectation, OutputPinExpectation, SentPacket, ReceivedPacket.
- Exceptions (all subclasses of AssertionError):
    - QueueExhaustedException, UnexpectedCallException,
      OwnershipViolationException, PacketMismatchException,
      IncompleteConsumptionException.
"""

from .exceptions import (
    IncompleteConsumptionException,
    MockException,
    OwnershipViolationException,
    PacketMismatchException,
    QueueExhaustedException,
    UnexpectedCallException,
)
from .expectations import (
    Expectation,
    Family,
    InputPinExpectation,
    InterfaceExpectation,
    OutputPinExpectation,
    QueueEntry,
    ReceivedPacket,
    SentPacket,
    family_of,
)
from .generic import GenericMock
from .hal import Infallible, InputPin, Interface, InterfaceError, OutputPin, StatefulOutputPin
from .input_pin import InputPinMock
from .interface import InterfaceMock
from .mock import Mock
from .output_pin import OutputPinMock
from .packet import Packet
from .tracker import ExpectationTracker

__all__ = [
    "ExpectationTracker",
    "Mock",
    "GenericMock",
    "InputPinMock",
    "OutputPinMock",
    "InterfaceMock",
    "Packet",
    "Expectation",
    "Family",
    "InputPinExpectation",
    "OutputPinExpectation",
    "InterfaceExpectation",
    "SentPacket",
    "ReceivedPacket",
    "QueueEntry",
    "family_of",
    "InputPin",
    "OutputPin",
    "StatefulOutputPin",
    "Interface",
    "InterfaceError",
    "Infallible",
    "MockException",
    "QueueExhaustedException",
    "UnexpectedCallException",
    "OwnershipViolationException",
    "PacketMismatchException",
    "IncompleteConsumptionException",
]

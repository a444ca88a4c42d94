"""Defines the expectations that make up a test script.

An expectation is a single recorded fact about one anticipated interaction.
Expectations form a closed sum with one variant per capability family, and
each family carries its own closed set of facts:

- Interface: `SentPacket(packet)` or `ReceivedPacket(packet)`
- InputPin: `InputPinExpectation.IS_HIGH` or `InputPinExpectation.IS_LOW`
- OutputPin: `OutputPinExpectation.SET_HIGH` or `OutputPinExpectation.SET_LOW`

All expectations are immutable and compare structurally.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

from .packet import Packet


class Family(Enum):
    """The capability families an expectation can belong to."""

    INTERFACE = "interface"
    INPUT_PIN = "input_pin"
    OUTPUT_PIN = "output_pin"


class InputPinExpectation(Enum):
    """The level an input pin reports when it is queried.

    A single fact answers both queries: `IS_HIGH` makes `is_high` return True
    and `is_low` return False, and `IS_LOW` does the opposite.
    """

    IS_HIGH = "is_high"
    IS_LOW = "is_low"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"


class OutputPinExpectation(Enum):
    """The level an output pin is expected to be driven to."""

    SET_HIGH = "set_high"
    SET_LOW = "set_low"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"


@dataclass(frozen=True)
class InterfaceExpectation:
    """Base class for the facts recorded about a protocol interface.

    Attributes:
        packet (Packet): The packet involved in the interaction.
    """

    packet: Packet

    def __post_init__(self):
        if type(self) is InterfaceExpectation:
            raise TypeError("Use SentPacket or ReceivedPacket instead of InterfaceExpectation")
        if not isinstance(self.packet, Packet):
            raise TypeError(f"{self.__class__.__name__} expects a Packet, got {type(self.packet).__name__}")


@dataclass(frozen=True)
class SentPacket(InterfaceExpectation):
    """The code under test is expected to send `packet`."""


@dataclass(frozen=True)
class ReceivedPacket(InterfaceExpectation):
    """The code under test is expected to receive `packet`."""


Expectation = Union[InterfaceExpectation, InputPinExpectation, OutputPinExpectation]


class QueueEntry(NamedTuple):
    """An expectation tagged with the owner index of the mock that must consume it."""

    index: int
    expectation: Expectation


def family_of(expectation: Expectation) -> Family:
    """Classifies an expectation by capability family.

    Args:
        expectation (Expectation): The expectation to classify.

    Returns:
        Family: The family the expectation belongs to.

    Raises:
        TypeError: If the value is not an expectation.
    """
    if isinstance(expectation, InterfaceExpectation):
        return Family.INTERFACE
    if isinstance(expectation, InputPinExpectation):
        return Family.INPUT_PIN
    if isinstance(expectation, OutputPinExpectation):
        return Family.OUTPUT_PIN

    raise TypeError(f"Not an expectation: {expectation!r}")

"""Abstract capability contracts satisfied by the mocks.

These mirror the hardware abstraction interfaces that device code is written
against: digital input pins, digital output pins (optionally with read-back)
and a packet-oriented protocol interface. Code under test should depend on
these contracts so that a mock can be handed to it in place of real hardware.

Each contract names the exception type its implementations may raise through
the `Error` class attribute.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Type

from .packet import Packet


class Infallible(Exception):
    """An error type that can never occur.

    Capabilities whose contract allows failure, but whose implementation
    never fails, declare this as their `Error`. It cannot be instantiated.
    """

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} cannot be instantiated")


class InterfaceError(Exception):
    """Raised by a protocol interface when a packet cannot be sent or received."""


class InputPin(ABC):
    """A digital input whose level can be queried."""

    Error: ClassVar[Type[Exception]] = Infallible

    @abstractmethod
    def is_high(self) -> bool:
        """Returns True if the input is driven high."""

    @abstractmethod
    def is_low(self) -> bool:
        """Returns True if the input is driven low."""


class OutputPin(ABC):
    """A digital output that can be driven high or low."""

    Error: ClassVar[Type[Exception]] = Infallible

    @abstractmethod
    def set_high(self) -> None:
        """Drives the output high."""

    @abstractmethod
    def set_low(self) -> None:
        """Drives the output low."""


class StatefulOutputPin(OutputPin):
    """An output pin that can report the level it was last set to."""

    @abstractmethod
    def is_set_high(self) -> bool:
        """Returns True if the output is currently set high."""

    @abstractmethod
    def is_set_low(self) -> bool:
        """Returns True if the output is currently set low."""


class Interface(ABC):
    """A packet-oriented communication interface."""

    Error: ClassVar[Type[Exception]] = InterfaceError

    @abstractmethod
    def try_send_packet(self, packet: Packet) -> None:
        """Sends a packet.

        Args:
            packet (Packet): The packet to send.

        Raises:
            InterfaceError: If the packet could not be sent.
        """

    @abstractmethod
    def try_get_packet(self) -> Packet:
        """Receives the next packet.

        Returns:
            Packet: The received packet.

        Raises:
            InterfaceError: If no packet could be received.
        """

"""An owner-indexed handle into an `ExpectationTracker`."""

from typing import TYPE_CHECKING, ClassVar, Type

from .adapters import InputPinAdapter, InterfaceAdapter, OutputPinAdapter
from .exceptions import PacketMismatchException, UnexpectedCallException
from .expectations import InputPinExpectation, OutputPinExpectation, ReceivedPacket, SentPacket
from .hal import Infallible, InterfaceError
from .packet import Packet

if TYPE_CHECKING:
    from .tracker import ExpectationTracker


class Mock(InputPinAdapter, OutputPinAdapter, InterfaceAdapter):
    """A mock device bound to one owner index of a shared tracker.

    A `Mock` satisfies every capability contract at once, so the same handle
    can be passed as an input pin, an output pin or a protocol interface.
    Each call pops the next entry from the tracker, checks that the entry
    belongs to this handle's index, then checks that it describes the call
    being made. Any mismatch is raised immediately and also recorded on the
    tracker.

    Handles are created with `ExpectationTracker.create_mock()`. Use `clone()`
    to pass the same simulated device to several consumers.

    A handle serves several contracts, so it carries one error type per
    capability: `Error` is the pin error type (`Infallible`, never raised)
    and `InterfaceError` is the error type of the protocol interface. Neither
    is raised by the mock itself; script mismatches raise `MockException`.

    Attributes:
        tracker (ExpectationTracker): The tracker this handle consumes from
        index (int): The owner index of this handle
    """

    Error: ClassVar[Type[Exception]] = Infallible
    InterfaceError: ClassVar[Type[Exception]] = InterfaceError

    def __init__(self, tracker: "ExpectationTracker", index: int):
        self.tracker = tracker
        self.index = index

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(index={self.index})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mock):
            return NotImplemented
        return self.tracker is other.tracker and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.tracker), self.index))

    def clone(self) -> "Mock":
        """Returns another handle with the same tracker and owner index."""
        return Mock(self.tracker, self.index)

    def _unexpected(self, call: str, expectation) -> None:
        self.tracker.fail(UnexpectedCallException(call, expectation, self.index))

    def query_input_state(self, call: str = "is_high") -> bool:
        """Consumes an input pin expectation and returns the level it records.

        Args:
            call (str): The name of the query being answered, for diagnostics

        Returns:
            bool: True for `IS_HIGH`, False for `IS_LOW`.
        """
        expectation = self.tracker.pop_next(call, self.index)
        if not isinstance(expectation, InputPinExpectation):
            self._unexpected(call, expectation)

        return expectation is InputPinExpectation.IS_HIGH

    def set_output_state(self, high: bool) -> None:
        """Consumes an output pin expectation matching the requested level.

        Args:
            high (bool): True if the pin is being driven high
        """
        call, wanted = (
            ("set_high", OutputPinExpectation.SET_HIGH) if high else ("set_low", OutputPinExpectation.SET_LOW)
        )

        expectation = self.tracker.pop_next(call, self.index)
        if expectation is not wanted:
            self._unexpected(call, expectation)

        self.tracker.set_output_level(self.index, high)

    def output_state(self) -> bool:
        """Returns the level last set through this owner index, low if never set."""
        return self.tracker.get_output_level(self.index)

    def send_packet(self, packet: Packet) -> None:
        """Consumes a `SentPacket` expectation and compares it with `packet`.

        Args:
            packet (Packet): The packet being sent

        Raises:
            TypeError: If `packet` is not a Packet.
        """
        if not isinstance(packet, Packet):
            raise TypeError(f"Expected a Packet, got {type(packet).__name__}")

        expectation = self.tracker.pop_next("try_send_packet", self.index)
        if not isinstance(expectation, SentPacket):
            self._unexpected("try_send_packet", expectation)

        if expectation.packet.diff(packet):
            self.tracker.fail(PacketMismatchException("try_send_packet", expectation.packet, packet, self.index))

    def receive_packet(self) -> Packet:
        """Consumes a `ReceivedPacket` expectation and returns its packet."""
        expectation = self.tracker.pop_next("try_get_packet", self.index)
        if not isinstance(expectation, ReceivedPacket):
            self._unexpected("try_get_packet", expectation)

        return expectation.packet

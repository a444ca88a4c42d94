"""A protocol interface mock backed by its own queue of packet expectations."""

from .exceptions import PacketMismatchException, QueueExhaustedException, UnexpectedCallException
from .expectations import InterfaceExpectation, ReceivedPacket, SentPacket
from .generic import GenericMock
from .hal import Interface
from .packet import Packet


class InterfaceMock(GenericMock[InterfaceExpectation], Interface):
    """Replays received packets and checks sent packets against the script.

    Example:
        mock = InterfaceMock([SentPacket(request), ReceivedPacket(reply)])
        device.poll(mock)
        mock.done()
    """

    def try_get_packet(self) -> Packet:
        expectation = self.next()
        if expectation is None:
            self.fail(QueueExhaustedException("try_get_packet"))
        if not isinstance(expectation, ReceivedPacket):
            self.fail(UnexpectedCallException("try_get_packet", expectation))

        return expectation.packet

    def try_send_packet(self, packet: Packet) -> None:
        if not isinstance(packet, Packet):
            raise TypeError(f"Expected a Packet, got {type(packet).__name__}")

        expectation = self.next()
        if expectation is None:
            self.fail(QueueExhaustedException("try_send_packet"))
        if not isinstance(expectation, SentPacket):
            self.fail(UnexpectedCallException("try_send_packet", expectation))

        if expectation.packet.diff(packet):
            self.fail(PacketMismatchException("try_send_packet", expectation.packet, packet))

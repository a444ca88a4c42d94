"""Thin adapters from the capability contracts to the mock operations.

Each mixin implements one contract from `ross_mock.hal` in terms of the
operations a `Mock` exposes. The mixins hold no state of their own and add
no failure modes.
"""

from .hal import Infallible, InputPin, Interface, StatefulOutputPin
from .packet import Packet


class InputPinAdapter(InputPin):
    """Implements `InputPin` on top of `query_input_state`."""

    Error = Infallible

    def is_high(self) -> bool:
        return self.query_input_state("is_high")

    def is_low(self) -> bool:
        return not self.query_input_state("is_low")


class OutputPinAdapter(StatefulOutputPin):
    """Implements `StatefulOutputPin` on top of `set_output_state`.

    Read-back does not consume expectations. It reports the level set by the
    last successful `set_high` or `set_low` through the same owner index.
    """

    Error = Infallible

    def set_high(self) -> None:
        self.set_output_state(True)

    def set_low(self) -> None:
        self.set_output_state(False)

    def is_set_high(self) -> bool:
        return self.output_state()

    def is_set_low(self) -> bool:
        return not self.output_state()


class InterfaceAdapter(Interface):
    """Implements `Interface` on top of `send_packet` and `receive_packet`."""

    def try_send_packet(self, packet: Packet) -> None:
        self.send_packet(packet)

    def try_get_packet(self) -> Packet:
        return self.receive_packet()

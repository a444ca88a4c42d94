"""An output pin mock backed by its own queue of `OutputPinExpectation` values."""

from .exceptions import QueueExhaustedException, UnexpectedCallException
from .expectations import OutputPinExpectation
from .generic import GenericMock
from .hal import Infallible, OutputPin


class OutputPinMock(GenericMock[OutputPinExpectation], OutputPin):
    """Checks that the pin is driven in the order given by the script."""

    Error = Infallible

    def _set(self, call: str, wanted: OutputPinExpectation) -> None:
        expectation = self.next()
        if expectation is None:
            self.fail(QueueExhaustedException(call))
        if expectation is not wanted:
            self.fail(UnexpectedCallException(call, expectation))

    def set_high(self) -> None:
        self._set("set_high", OutputPinExpectation.SET_HIGH)

    def set_low(self) -> None:
        self._set("set_low", OutputPinExpectation.SET_LOW)

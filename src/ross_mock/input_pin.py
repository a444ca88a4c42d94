"""An input pin mock backed by its own queue of `InputPinExpectation` values."""

from .exceptions import QueueExhaustedException, UnexpectedCallException
from .expectations import InputPinExpectation
from .generic import GenericMock
from .hal import Infallible, InputPin


class InputPinMock(GenericMock[InputPinExpectation], InputPin):
    """Answers level queries from a script of `InputPinExpectation` values.

    Each query consumes one expectation, whichever of `is_high` or `is_low`
    is called: `IS_HIGH` answers `is_high` with True and `is_low` with False.
    """

    Error = Infallible

    def _level(self, call: str) -> bool:
        expectation = self.next()
        if expectation is None:
            self.fail(QueueExhaustedException(call))
        if not isinstance(expectation, InputPinExpectation):
            self.fail(UnexpectedCallException(call, expectation))

        return expectation is InputPinExpectation.IS_HIGH

    def is_high(self) -> bool:
        return self._level("is_high")

    def is_low(self) -> bool:
        return not self._level("is_low")

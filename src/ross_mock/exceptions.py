"""Custom exceptions raised by the mocks.

Every exception here is fatal for the running test. They derive from
`AssertionError` so that test runners report them as failed assertions
rather than as errors in the test itself.
"""

from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from .expectations import Expectation
    from .packet import Packet


class MockException(AssertionError):
    """Base exception for an interaction that diverged from the expected script.

    Attributes:
        call (Optional[str]): The name of the mocked method that was called
        index (Optional[int]): The owner index of the calling mock, if any
    """

    def __init__(self, message: str, *, call: Optional[str] = None, index: Optional[int] = None):
        """Initializes the MockException.

        Args:
            message (str): A human-readable description of the failure.
            call (Optional[str]): The name of the mocked method that was called.
            index (Optional[int]): The owner index of the calling mock.
        """
        self.call = call
        self.index = index
        super().__init__(message)


class QueueExhaustedException(MockException):
    """Raised when a mocked method is called but nothing is left to expect."""

    def __init__(self, call: str, index: Optional[int] = None):
        super().__init__(f"Did not expect call to {call}, nothing was expected", call=call, index=index)


class UnexpectedCallException(MockException):
    """Raised when the next expectation does not describe the call being made.

    Attributes:
        expectation (Expectation): The expectation that was found instead.
    """

    def __init__(self, call: str, expectation: "Expectation", index: Optional[int] = None):
        self.expectation = expectation
        super().__init__(f"Did not expect call to {call}, expected: {expectation!r}", call=call, index=index)


class OwnershipViolationException(MockException):
    """Raised when a mock reaches an expectation queued for another mock.

    Attributes:
        expected_index (int): The owner index of the expectation that was found.
        expectation (Expectation): The expectation that was found.
    """

    def __init__(self, call: str, index: int, expected_index: int, expectation: "Expectation"):
        self.expected_index = expected_index
        self.expectation = expectation
        super().__init__(
            f"Mock with index {index} cannot verify expectation with index {expected_index} "
            f"(call to {call}, expected: {expectation!r})",
            call=call,
            index=index,
        )


class PacketMismatchException(MockException):
    """Raised when a sent packet differs from the expected one.

    Attributes:
        expected (Packet): The packet the script expected to be sent.
        actual (Packet): The packet that was actually sent.
        fields (List[str]): The names of the fields that differ.
    """

    def __init__(self, call: str, expected: "Packet", actual: "Packet", index: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        self.fields: List[str] = expected.diff(actual)

        details = ", ".join(
            f"{name}: expected {getattr(expected, name)!r}, got {getattr(actual, name)!r}" for name in self.fields
        )
        super().__init__(f"Packet sent through {call} does not match the expectation ({details})", call=call, index=index)


class IncompleteConsumptionException(MockException):
    """Raised by a completion check while expectations are still queued.

    Attributes:
        remaining (int): The number of expectations that were never consumed.
        entries (Sequence[object]): The unconsumed entries, in queue order.
    """

    def __init__(self, remaining: int, entries: Sequence[object] = ()):
        self.remaining = remaining
        self.entries = tuple(entries)

        message = f"{remaining} expectation(s) were not consumed"
        if self.entries:
            message += ": " + ", ".join(repr(entry) for entry in self.entries)
        super().__init__(message)

"""A single, ungrouped FIFO of expectations shared between clones."""

import logging
from typing import Generic, Iterable, List, Optional, TypeVar

from .exceptions import IncompleteConsumptionException, MockException
from .utils import logger_factory

T = TypeVar("T")


class _Queue(Generic[T]):
    """The state shared by every clone of a `GenericMock`."""

    def __init__(self, expectations: Iterable[T]):
        self.expectations: List[T] = list(expectations)
        self.cursor = 0
        self.failure: Optional[MockException] = None


class GenericMock(Generic[T]):
    """A mock backed by a plain list of expectations and a cursor.

    Clones made with `clone()` share the same list and cursor, so a value
    consumed through one clone is consumed for all of them. This lets a test
    keep one handle for the final `done()` check while the code under test
    owns another.

    Attributes:
        _logger (logging.Logger): A logger for this instance
        _queue (_Queue): The shared expectations, cursor and first failure
    """

    def __init__(self, expectations: Iterable[T] = (), *, log_level: int = logging.INFO):
        """Initializes the mock.

        Args:
            expectations (Iterable[T]): The expected values, in the order they
                must be consumed
            log_level (int): The logging level for this instance
        """
        self._logger: logging.Logger = logger_factory.get_logger(self.__class__.__name__, level=log_level)
        self._log_level = log_level
        self._queue: _Queue[T] = _Queue(expectations)

    def clone(self) -> "GenericMock[T]":
        """Returns a new mock sharing this mock's expectations and cursor."""
        other = object.__new__(self.__class__)
        other._logger = self._logger
        other._log_level = self._log_level
        other._queue = self._queue
        return other

    def expect(self, expectation: T) -> None:
        """Appends an expectation to the end of the queue."""
        self._queue.expectations.append(expectation)

    def next(self) -> Optional[T]:
        """Consumes and returns the next expectation.

        Returns:
            Optional[T]: The next expectation, or None if all of them were
                already consumed. The cursor never moves past the end.
        """
        queue = self._queue
        if queue.cursor >= len(queue.expectations):
            return None

        expectation = queue.expectations[queue.cursor]
        queue.cursor += 1
        self._logger.debug(f"Consumed expectation {queue.cursor}/{len(queue.expectations)}: {expectation!r}")
        return expectation

    def __iter__(self) -> "GenericMock[T]":
        return self

    def __next__(self) -> T:
        if self.remaining() == 0:
            raise StopIteration
        return self.next()

    def remaining(self) -> int:
        """Returns the number of expectations not consumed yet."""
        return len(self._queue.expectations) - self._queue.cursor

    def fail(self, error: MockException) -> None:
        """Records a fatal failure on the shared queue and raises it.

        Only the first failure is kept, so that `done` can raise it again even
        if the code under test swallowed it.

        Args:
            error (MockException): The failure to raise.

        Raises:
            MockException: Always, the given `error`.
        """
        if self._queue.failure is None:
            self._queue.failure = error

        self._logger.error(str(error))
        raise error

    def done(self) -> None:
        """Checks that every expectation was consumed.

        Raises:
            MockException: The first failure raised through this mock, if any.
            IncompleteConsumptionException: If any expectation is left.
        """
        if self._queue.failure is not None:
            raise self._queue.failure

        remaining = self.remaining()
        if remaining:
            entries = self._queue.expectations[self._queue.cursor :]
            self._logger.error(f"{remaining} expectation(s) were not consumed: {entries!r}")
            raise IncompleteConsumptionException(remaining, entries)

        self._logger.debug("All expectations were consumed.")

"""The shared, ordered script of expectations for a group of mocks.

A single `ExpectationTracker` holds one queue of `(index, expectation)`
entries and one cursor. Any number of `Mock` handles can be derived from it;
each handle gets its own owner index and may only consume entries carrying
that index. Because all handles pop from the same cursor, the calls made
through them must follow the global order in which the entries were queued,
even when the handles stand in for different devices.

The tracker is not thread safe. All handles derived from one tracker must be
driven from the same thread.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from .exceptions import (
    IncompleteConsumptionException,
    MockException,
    OwnershipViolationException,
    QueueExhaustedException,
)
from .expectations import Expectation, QueueEntry, family_of
from .utils import logger_factory

if TYPE_CHECKING:
    from .mock import Mock

#: The owner index given to the first mock created from a tracker.
FIRST_MOCK_INDEX = 0


class ExpectationTracker:
    """Owns the global expectation queue and mediates every pop from it.

    Typical use:

        with ExpectationTracker() as tracker:
            button = tracker.create_mock()
            led = tracker.create_mock()
            tracker.expect(button, InputPinExpectation.IS_HIGH)
            tracker.expect(led, OutputPinExpectation.SET_HIGH)

            run_device(button, led)
        # Leaving the block checks that every expectation was consumed.

    Attributes:
        _logger (logging.Logger): A logger for this instance
        _entries (List[QueueEntry]): The script, in the order it must be followed
        _cursor (int): The position of the next entry to consume
        _next_index (int): The owner index for the next created mock
        _output_levels (Dict[int, bool]): The last level set through each
            owner index, used for output read-back
        _failure (Optional[MockException]): The first fatal failure raised
            through this tracker
    """

    def __init__(self, *, log_level: int = logging.INFO):
        """Initializes an empty tracker.

        Args:
            log_level (int): The logging level for this instance and for the
                mocks created from it
        """
        self._logger: logging.Logger = logger_factory.get_logger(self.__class__.__name__, level=log_level)

        self._entries: List[QueueEntry] = []
        self._cursor = 0
        self._next_index = FIRST_MOCK_INDEX
        self._output_levels: Dict[int, bool] = {}
        self._failure: Optional[MockException] = None

        self._logger.debug(f"Initialized {self.__class__.__name__}")

    def __enter__(self) -> "ExpectationTracker":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        # Do not mask the exception that is already propagating.
        if exc_type is None:
            self.verify_all_consumed()
        return False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        """The position of the next entry to consume."""
        return self._cursor

    def remaining(self) -> int:
        """Returns the number of entries not consumed yet."""
        return len(self._entries) - self._cursor

    def pending(self) -> List[QueueEntry]:
        """Returns the entries not consumed yet, in queue order."""
        return self._entries[self._cursor :]

    def create_mock(self) -> "Mock":
        """Creates a mock handle with the next free owner index.

        Returns:
            Mock: A new handle bound to this tracker.
        """
        from .mock import Mock

        index = self._next_index
        self._next_index += 1

        self._logger.debug(f"Created mock with index {index}")
        return Mock(self, index)

    def expect(self, mock: "Mock", expectation: Expectation) -> None:
        """Appends an expectation that `mock` must consume.

        Args:
            mock (Mock): The handle the expectation belongs to
            expectation (Expectation): The expected interaction

        Raises:
            ValueError: If the mock was created by a different tracker.
            TypeError: If `expectation` is not an expectation.
        """
        if mock.tracker is not self:
            raise ValueError(f"Mock with index {mock.index} belongs to a different tracker.")

        self.enqueue(mock.index, expectation)

    def enqueue(self, index: int, expectation: Expectation) -> None:
        """Appends an expectation tagged with a raw owner index.

        Args:
            index (int): The owner index of the mock that must consume it
            expectation (Expectation): The expected interaction

        Raises:
            TypeError: If `expectation` is not an expectation.
        """
        family_of(expectation)

        self._entries.append(QueueEntry(index, expectation))
        self._logger.debug(f"Queued expectation #{len(self._entries)} for index {index}: {expectation!r}")

    def pop_next(self, call: str, index: int) -> Expectation:
        """Consumes the next entry on behalf of the mock with `index`.

        The cursor advances by exactly one whenever an entry exists, whether
        or not it belongs to the caller.

        Args:
            call (str): The name of the mocked method being called
            index (int): The owner index of the calling mock

        Returns:
            Expectation: The consumed expectation.

        Raises:
            QueueExhaustedException: If every entry was already consumed.
            OwnershipViolationException: If the entry belongs to another mock.
        """
        if self._cursor >= len(self._entries):
            self.fail(QueueExhaustedException(call, index))

        entry = self._entries[self._cursor]
        self._cursor += 1

        if entry.index != index:
            self.fail(OwnershipViolationException(call, index, entry.index, entry.expectation))

        self._logger.debug(
            f"Mock with index {index} consumed expectation {self._cursor}/{len(self._entries)} "
            f"in {call}: {entry.expectation!r}"
        )
        return entry.expectation

    def fail(self, error: MockException) -> None:
        """Records a fatal failure and raises it.

        Only the first failure is kept, so that it can be raised again by
        `verify_all_consumed` even if the code under test swallowed it.

        Args:
            error (MockException): The failure to raise.

        Raises:
            MockException: Always, the given `error`.
        """
        if self._failure is None:
            self._failure = error

        self._logger.error(str(error))
        raise error

    def get_output_level(self, index: int) -> bool:
        """Returns the last level set through `index`, low if never set."""
        return self._output_levels.get(index, False)

    def set_output_level(self, index: int, high: bool) -> None:
        """Records the level just set through `index`."""
        self._output_levels[index] = high

    def verify_all_consumed(self) -> None:
        """Checks that the script was followed to the end.

        Raises:
            MockException: The first failure raised through this tracker, if any.
            IncompleteConsumptionException: If any entry was not consumed.
        """
        if self._failure is not None:
            raise self._failure

        remaining = self.remaining()
        if remaining:
            error = IncompleteConsumptionException(remaining, self.pending())
            self._logger.error(str(error))
            raise error

        self._logger.info(f"All {len(self._entries)} expectation(s) were consumed.")

    verify_complete = verify_all_consumed

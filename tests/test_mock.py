"""Unit tests for the owner-indexed `Mock` handle.

These tests exercise the handles the way device code would: through the
capability methods (`is_high`, `set_low`, `try_send_packet`, ...), with one or
more handles sharing a single tracker.
"""

import pytest

from ross_mock import (
    Infallible,
    InputPin,
    InputPinExpectation,
    Interface,
    InterfaceError,
    OutputPinExpectation,
    OwnershipViolationException,
    Packet,
    PacketMismatchException,
    QueueExhaustedException,
    ReceivedPacket,
    SentPacket,
    StatefulOutputPin,
    UnexpectedCallException,
)


def test_mock_satisfies_every_capability(first_mock):
    assert isinstance(first_mock, InputPin)
    assert isinstance(first_mock, StatefulOutputPin)
    assert isinstance(first_mock, Interface)
    assert first_mock.Error is Infallible
    assert first_mock.InterfaceError is InterfaceError


def test_infallible_cannot_be_raised():
    with pytest.raises(TypeError):
        Infallible()


def test_send_receive_send(tracker, first_mock, packet_1111, packet_2222, packet_3333):
    tracker.expect(first_mock, SentPacket(packet_1111))
    tracker.expect(first_mock, ReceivedPacket(packet_2222))
    tracker.expect(first_mock, SentPacket(packet_3333))

    first_mock.try_send_packet(Packet(is_error=True, device_address=0x1111, data=[0x11, 0x11, 0x11]))
    assert first_mock.try_get_packet() == Packet(is_error=False, device_address=0x2222, data=[0x22, 0x22, 0x22])
    first_mock.try_send_packet(packet_3333)

    tracker.verify_all_consumed()


@pytest.mark.parametrize(
    "expectation, is_high, is_low",
    [
        (InputPinExpectation.IS_HIGH, True, False),
        (InputPinExpectation.IS_LOW, False, True),
    ],
)
def test_input_fact_answers_both_queries(tracker, first_mock, expectation, is_high, is_low):
    tracker.expect(first_mock, expectation)
    tracker.expect(first_mock, expectation)

    assert first_mock.is_high() is is_high
    assert first_mock.is_low() is is_low
    tracker.verify_all_consumed()


def test_two_handles_in_global_order(tracker, first_mock, second_mock):
    tracker.expect(first_mock, InputPinExpectation.IS_HIGH)
    tracker.expect(second_mock, OutputPinExpectation.SET_LOW)
    tracker.expect(first_mock, InputPinExpectation.IS_LOW)

    assert first_mock.is_high() is True
    second_mock.set_low()
    assert first_mock.is_low() is True

    tracker.verify_all_consumed()


def test_handle_called_out_of_turn(tracker, first_mock, second_mock):
    tracker.expect(first_mock, InputPinExpectation.IS_HIGH)
    tracker.expect(second_mock, OutputPinExpectation.SET_LOW)
    tracker.expect(first_mock, InputPinExpectation.IS_LOW)

    with pytest.raises(OwnershipViolationException) as exc_info:
        second_mock.set_low()

    assert exc_info.value.index == 1
    assert exc_info.value.expected_index == 0
    assert exc_info.value.expectation is InputPinExpectation.IS_HIGH


def test_clones_share_owner_index(tracker, first_mock):
    clone = first_mock.clone()
    tracker.expect(first_mock, OutputPinExpectation.SET_HIGH)
    tracker.expect(first_mock, OutputPinExpectation.SET_LOW)

    clone.set_high()
    first_mock.set_low()

    assert clone == first_mock
    tracker.verify_all_consumed()


@pytest.mark.parametrize(
    "call, args",
    [
        ("is_high", ()),
        ("is_low", ()),
        ("set_high", ()),
        ("set_low", ()),
        ("try_get_packet", ()),
        ("try_send_packet", (Packet(is_error=False, device_address=0x0001, data=b"\x01"),)),
    ],
)
def test_call_on_empty_queue(first_mock, call, args):
    with pytest.raises(QueueExhaustedException, match=f"Did not expect call to {call}, nothing was expected"):
        getattr(first_mock, call)(*args)


def test_family_mismatch_consumes_exactly_one_entry(tracker, first_mock, packet_1111, mocker):
    pop_next = mocker.spy(tracker, "pop_next")
    tracker.expect(first_mock, SentPacket(packet_1111))
    tracker.expect(first_mock, InputPinExpectation.IS_HIGH)

    with pytest.raises(UnexpectedCallException, match="Did not expect call to is_high, expected: SentPacket") as exc_info:
        first_mock.is_high()

    assert exc_info.value.expectation == SentPacket(packet_1111)
    assert exc_info.value.index == 0
    assert pop_next.call_count == 1
    assert tracker.cursor == 1


@pytest.mark.parametrize(
    "queued, call",
    [
        (OutputPinExpectation.SET_HIGH, "set_low"),
        (OutputPinExpectation.SET_LOW, "set_high"),
    ],
)
def test_wrong_output_level(tracker, first_mock, queued, call):
    tracker.expect(first_mock, queued)

    with pytest.raises(UnexpectedCallException, match=f"Did not expect call to {call}"):
        getattr(first_mock, call)()


def test_receive_when_send_was_expected(tracker, first_mock, packet_1111):
    tracker.expect(first_mock, SentPacket(packet_1111))

    with pytest.raises(UnexpectedCallException, match="Did not expect call to try_get_packet"):
        first_mock.try_get_packet()


def test_sent_packet_mismatch_names_fields(tracker, first_mock, packet_1111):
    tracker.expect(first_mock, SentPacket(packet_1111))

    with pytest.raises(PacketMismatchException, match="data: expected") as exc_info:
        first_mock.try_send_packet(Packet(is_error=False, device_address=0x1111, data=[0x11, 0x11]))

    assert exc_info.value.fields == ["is_error", "data"]
    assert exc_info.value.expected == packet_1111


def test_send_rejects_non_packets(tracker, first_mock):
    with pytest.raises(TypeError):
        first_mock.try_send_packet(b"\x11")

    # Nothing was consumed and nothing was recorded as a failure.
    assert tracker.cursor == 0
    tracker.verify_all_consumed()


def test_output_read_back_follows_last_set(tracker, first_mock, second_mock):
    tracker.expect(first_mock, OutputPinExpectation.SET_HIGH)
    tracker.expect(first_mock, OutputPinExpectation.SET_LOW)

    # Low until first set.
    assert first_mock.is_set_low() is True
    assert first_mock.is_set_high() is False

    first_mock.set_high()
    assert first_mock.is_set_high() is True
    assert first_mock.clone().is_set_high() is True
    # Other owner indices keep their own level.
    assert second_mock.is_set_high() is False

    first_mock.set_low()
    assert first_mock.is_set_low() is True

    # Read-back never consumes expectations.
    tracker.verify_all_consumed()


def test_device_code_swallowing_failures_is_caught(tracker, first_mock):
    """Code that catches everything cannot hide a mismatch from the test."""

    def careless_device(pin):
        try:
            pin.set_high()
        except Exception:
            pass

    careless_device(first_mock)

    with pytest.raises(QueueExhaustedException):
        tracker.verify_all_consumed()

"""Tests for the appointment status lifecycle."""

import pytest

from dental_clinic.domain.scheduling.exceptions import InvalidTransitionError
from dental_clinic.domain.scheduling.status import (
    can_transition,
    is_noop_transition,
    validate_status_transition,
)


@pytest.mark.parametrize(
    "current,new",
    [
        ("pending", "confirmed"),
        ("pending", "canceled"),
        ("confirmed", "canceled"),
        ("confirmed", "confirmed"),
    ],
)
def test_allowed(current, new):
    assert can_transition(current, new)
    validate_status_transition(current, new)


@pytest.mark.parametrize(
    "current,new",
    [
        ("canceled", "pending"),
        ("canceled", "confirmed"),
        ("canceled", "canceled"),
        ("confirmed", "pending"),
        ("pending", "pending"),
        ("unknown", "confirmed"),
    ],
)
def test_rejected(current, new):
    assert not can_transition(current, new)
    with pytest.raises(InvalidTransitionError) as exc_info:
        validate_status_transition(current, new)

    assert exc_info.value.from_status == current
    assert exc_info.value.to_status == new
    assert exc_info.value.to_dict()["error"] == "invalid_transition"


def test_reconfirm_is_noop():
    assert is_noop_transition("confirmed", "confirmed")
    assert not is_noop_transition("pending", "confirmed")
    assert not is_noop_transition("canceled", "canceled")

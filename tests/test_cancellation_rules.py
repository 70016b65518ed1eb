import pytest

from backoffice.core.exceptions import ConflictException, ValidationException
from backoffice.schemas.cancellation_policy_schemas import CancellationRuleInput
from backoffice.services.cancellation_rules import validate_rules


def rule(days, refund, order) -> CancellationRuleInput:
    return CancellationRuleInput(days_before_trip=days, refund_percentage=refund, display_order=order)


def test_valid_schedule():
    validate_rules([rule(30, 1.0, 1), rule(15, 0.5, 2), rule(0, 0, 3)])


def test_rules_in_any_order():
    validate_rules([rule(0, 0.1, 3), rule(30, 0.9, 1), rule(7, 0.5, 2)])


def test_equal_refunds_allowed():
    validate_rules([rule(30, 0.5, 1), rule(10, 0.5, 2)])


def test_empty_rules():
    with pytest.raises(ValidationException):
        validate_rules([])


def test_duplicate_days():
    with pytest.raises(ConflictException):
        validate_rules([rule(10, 0.5, 1), rule(10, 0.2, 2)])


def test_duplicate_display_order():
    with pytest.raises(ConflictException):
        validate_rules([rule(10, 0.5, 1), rule(5, 0.2, 1)])


def test_refund_growing_near_departure():
    with pytest.raises(ValidationException, match="must not increase"):
        validate_rules([rule(30, 0.2, 1), rule(5, 0.8, 2)])

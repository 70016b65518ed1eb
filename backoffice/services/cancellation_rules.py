"""Consistency checks for a cancellation policy's refund schedule."""

from collections.abc import Sequence

from backoffice.core.exceptions import ConflictException, ValidationException
from backoffice.schemas.cancellation_policy_schemas import CancellationRuleInput


def validate_rules(rules: Sequence[CancellationRuleInput]) -> None:
    """
    Check a full rule set before it is stored.

    Raises:
        ValidationException: If there are no rules, or a rule closer to
            departure refunds more than one further away
        ConflictException: If two rules share days_before_trip or display_order
    """
    if not rules:
        raise ValidationException("A cancellation policy needs at least one rule")

    seen_days: set[int] = set()
    seen_orders: set[int] = set()
    for rule in rules:
        if rule.days_before_trip in seen_days:
            raise ConflictException(f"Duplicate rule for {rule.days_before_trip} days before the trip")
        seen_days.add(rule.days_before_trip)

        if rule.display_order in seen_orders:
            raise ConflictException(f"Duplicate rule display order {rule.display_order}")
        seen_orders.add(rule.display_order)

    by_days = sorted(rules, key=lambda r: r.days_before_trip, reverse=True)
    for earlier, later in zip(by_days, by_days[1:]):
        if earlier.refund_percentage < later.refund_percentage:
            raise ValidationException(
                "Refund percentage must not increase as the trip gets closer "
                f"({earlier.days_before_trip} days: {earlier.refund_percentage}, "
                f"{later.days_before_trip} days: {later.refund_percentage})"
            )

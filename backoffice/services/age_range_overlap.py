"""Age range overlap detection."""

from typing import Iterable, Protocol

from backoffice.models.age_range import AgeRange


def ranges_overlap(candidate_min: int, candidate_max: int, existing_min: int, existing_max: int) -> bool:
    """
    Overlap test between a candidate and an existing range.

    Ranges that only touch at a boundary do not overlap: 0-12 and 12-18
    can coexist.
    """
    return (
        (existing_min <= candidate_min < existing_max)
        or (existing_min < candidate_max <= existing_max)
        or (candidate_min <= existing_min and candidate_max >= existing_max)
    )


class OverlapStrategy(Protocol):
    def find(
        self,
        candidate_min: int,
        candidate_max: int,
        existing: Iterable[AgeRange],
        exclude_id: int | None = None,
    ) -> AgeRange | None:
        ...


class LinearScanStrategy:
    """Checks every existing range in order; returns the first conflict"""

    def find(
        self,
        candidate_min: int,
        candidate_max: int,
        existing: Iterable[AgeRange],
        exclude_id: int | None = None,
    ) -> AgeRange | None:
        for age_range in existing:
            if exclude_id is not None and age_range.id == exclude_id:
                continue
            if ranges_overlap(candidate_min, candidate_max, age_range.min_age, age_range.max_age):
                return age_range
        return None


DEFAULT_STRATEGY: OverlapStrategy = LinearScanStrategy()


def find_overlap(
    candidate_min: int,
    candidate_max: int,
    existing: Iterable[AgeRange],
    exclude_id: int | None = None,
    strategy: OverlapStrategy = DEFAULT_STRATEGY,
) -> AgeRange | None:
    """
    Find the first existing range that overlaps [candidate_min, candidate_max].

    Args:
        candidate_min: Lower bound of the candidate
        candidate_max: Upper bound of the candidate
        existing: Stored ranges of the agency, in creation order
        exclude_id: ID of the range being updated, skipped in the scan
        strategy: Scan implementation

    Returns:
        The conflicting AgeRange, or None
    """
    return strategy.find(candidate_min, candidate_max, existing, exclude_id)

from __future__ import annotations

from dataclasses import dataclass

from .bundles import OutcomeCounts
from .exceptions import BundleValidationError


def _rate(total: int, satisfied_count: int) -> float:
    return round(100 * satisfied_count / total, 1)


@dataclass(frozen=True)
class SampleSummary:
    """
    Headline numbers for the dashboard cards.

    rate is the satisfied share in percent, rounded to one decimal. Prefer
    {@link from_counts} / {@link from_outcomes}; direct construction is checked
    so the rate cannot drift from the counts.
    """

    total: int
    satisfied_count: int
    rate: float

    def __post_init__(self) -> None:
        if self.total <= 0:
            raise BundleValidationError(f"Sample total must be positive, got {self.total}")
        if not 0 <= self.satisfied_count <= self.total:
            raise BundleValidationError(
                f"Satisfied count {self.satisfied_count} outside [0, {self.total}]"
            )
        expected = _rate(self.total, self.satisfied_count)
        if self.rate != expected:
            raise BundleValidationError(
                f"Rate {self.rate} does not match {self.satisfied_count}/{self.total} ({expected})"
            )

    @classmethod
    def from_counts(cls, total: int, satisfied_count: int) -> SampleSummary:
        if total <= 0:
            raise BundleValidationError(f"Sample total must be positive, got {total}")
        return cls(total=total, satisfied_count=satisfied_count, rate=_rate(total, satisfied_count))

    @classmethod
    def from_outcomes(cls, outcomes: OutcomeCounts) -> SampleSummary:
        return cls.from_counts(outcomes.total, outcomes.satisfied)

    @property
    def dissatisfied_count(self) -> int:
        return self.total - self.satisfied_count

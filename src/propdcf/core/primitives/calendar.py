# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar arithmetic for annual projections.

Projection years are anchored on the property's effective date: year index
``i`` runs from the i-th anniversary of the effective date through the day
before the next one. All helpers operate on immutable ``datetime.date``
values and return new values.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class ProjectionYear:
    """A single projection year window (inclusive on both ends)."""

    index: int
    start: date
    end: date

    @property
    def number(self) -> int:
        """1-based projection year number."""
        return self.index + 1

    def overlaps(self, start: date, end: date) -> bool:
        """True if the inclusive interval [start, end] touches this year."""
        return start <= self.end and end >= self.start


def add_years(anchor: date, years: int) -> date:
    """Shift a date by whole years (Feb 29 clamps to Feb 28)."""
    return anchor + relativedelta(years=years)


def projection_year(effective_date: date, year_index: int) -> ProjectionYear:
    """Return the window for a 0-based projection year."""
    start = add_years(effective_date, year_index)
    end = add_years(effective_date, year_index + 1) - timedelta(days=1)
    return ProjectionYear(index=year_index, start=start, end=end)


def full_years_elapsed(anchor: date, as_of: date) -> int:
    """
    Number of complete anniversaries of ``anchor`` reached on or before ``as_of``.

    Returns 0 when ``as_of`` precedes the first anniversary (including dates
    before ``anchor`` itself).
    """
    if as_of <= anchor:
        return 0
    return max(0, relativedelta(as_of, anchor).years)


def anniversary_before(anchor: date, as_of: date, years: int) -> bool:
    """True if the ``years``-th anniversary of ``anchor`` falls before ``as_of``."""
    return add_years(anchor, years) < as_of


def expired_within_prior_year(end_date: date, year_start: date) -> bool:
    """
    True if ``end_date`` falls in the twelve months immediately before ``year_start``.

    This is the year in which an expiring lease's renewal is resolved.
    """
    return add_years(year_start, -1) <= end_date < year_start

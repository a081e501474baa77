"""Filtering and aggregation over snapshots of leave requests.

Nothing here touches the store: every function takes an already-fetched
sequence of requests and returns new values, so dashboards can recompute on
every filter change.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from leave_tracker.models.enums import DateMatch, RequestStatus
from leave_tracker.schemas.request import RequestStats

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from leave_tracker.schemas.request import RequestFilter, RequestResponse


def duration_days(start_date: date, end_date: date) -> int:
    """Inclusive number of calendar days spanned by a request."""
    return abs((end_date - start_date).days) + 1


def default_date_match(*, admin_view: bool) -> DateMatch:
    """Date policy used when the caller does not pick one.

    Reviewers looking at a period want anything touching it; employees
    looking at their own history see only requests inside the window.
    """
    return DateMatch.OVERLAP if admin_view else DateMatch.CONTAINMENT


def _matches_search(request: RequestResponse, needle: str, *, admin_view: bool) -> bool:
    fields = [request.reason, request.type.label]
    if admin_view:
        fields.extend((request.name, request.email))
    return any(needle in field.lower() for field in fields)


def _matches_window(
    request: RequestResponse,
    date_from: date | None,
    date_to: date | None,
    date_match: DateMatch,
) -> bool:
    if date_match == DateMatch.OVERLAP:
        # [start, end] intersects [date_from, date_to]; a missing bound is open.
        if date_to is not None and request.start_date > date_to:
            return False
        if date_from is not None and request.end_date < date_from:
            return False
        return True

    if date_from is not None and request.start_date < date_from:
        return False
    if date_to is not None and request.end_date > date_to:
        return False
    return True


def filter_requests(
    requests: Sequence[RequestResponse],
    criteria: RequestFilter,
    *,
    admin_view: bool = False,
) -> list[RequestResponse]:
    """Return the requests matching ``criteria``, in their original order.

    ``admin_view`` widens search to the requester's name and email and
    selects the overlap date policy unless ``criteria.date_match`` is set.
    """
    date_match = criteria.date_match or default_date_match(admin_view=admin_view)
    needle = criteria.search.lower()
    has_window = criteria.date_from is not None or criteria.date_to is not None

    filtered: list[RequestResponse] = []
    for request in requests:
        if criteria.status != "all" and request.status != criteria.status:
            continue
        if criteria.type != "all" and request.type != criteria.type:
            continue
        if needle and not _matches_search(request, needle, admin_view=admin_view):
            continue
        if has_window and not _matches_window(request, criteria.date_from, criteria.date_to, date_match):
            continue
        filtered.append(request)
    return filtered


def approved_days(requests: Sequence[RequestResponse]) -> int:
    """Total days across accepted requests."""
    return sum(
        duration_days(r.start_date, r.end_date) for r in requests if r.status == RequestStatus.ACCEPTED
    )


def compute_stats(
    all_requests: Sequence[RequestResponse],
    filtered_requests: Sequence[RequestResponse],
) -> RequestStats:
    """Dashboard statistics.

    Status counts and requested days come from ``all_requests``; approved
    days come from ``filtered_requests``.
    """
    counts = Counter(r.status for r in all_requests)
    return RequestStats(
        total_count=len(all_requests),
        pending_count=counts[RequestStatus.PENDING],
        accepted_count=counts[RequestStatus.ACCEPTED],
        denied_count=counts[RequestStatus.DENIED],
        approved_days=approved_days(filtered_requests),
        total_days_requested=sum(duration_days(r.start_date, r.end_date) for r in all_requests),
    )

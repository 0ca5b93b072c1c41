"""Choosing which months to render."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from .exceptions import MonthSelectionError
from .models import MonthRequest

logger = logging.getLogger(__name__)


def _shift(request: MonthRequest, months: int) -> MonthRequest:
    try:
        shifted = request.first_day + relativedelta(months=months)
    except (OverflowError, ValueError) as exc:
        raise MonthSelectionError(
            f"No month {months:+d} from {request.year:04d}-{request.month:02d}"
        ) from exc
    return MonthRequest.from_date(shifted)


def previous_month(request: MonthRequest) -> MonthRequest:
    return _shift(request, -1)


def next_month(request: MonthRequest) -> MonthRequest:
    return _shift(request, 1)


def select_months(
    today: date,
    month: Optional[int] = None,
    year: Optional[int] = None,
    surrounding: bool = False,
) -> list[MonthRequest]:
    """Work out the months to show from command-line style choices.

    A year on its own selects all twelve of its months. Otherwise a single
    month is shown, defaulting to the current month and year. With
    ``surrounding`` the months immediately before and after the selection
    are added.

    Raises:
        MonthSelectionError: If a surrounding month falls outside the date range
    """
    if year is not None and month is None:
        requests = [MonthRequest(month=m, year=year) for m in range(1, 13)]
    else:
        requests = [
            MonthRequest(
                month=month if month is not None else today.month,
                year=year if year is not None else today.year,
            )
        ]

    if surrounding:
        requests.insert(0, previous_month(requests[0]))
        requests.append(next_month(requests[-1]))

    logger.debug(
        "Selected %d month(s): %s",
        len(requests),
        ", ".join(f"{r.year:04d}-{r.month:02d}" for r in requests),
    )
    return requests

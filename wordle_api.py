"""
wordle_api.py — NYT Wordle answer fetcher
=========================================
One GET per calendar day against the NYT Wordle endpoint. A failed fetch is
logged and reported as None so the caller can skip that day and pick it up
again on a later run.
"""

from __future__ import annotations

from typing import Optional

import requests

from calendar_day import CalendarDay
from logging_config import get_logger
from word_store import WordEntry

API_BASE = "https://www.nytimes.com/svc/wordle/v2"

logger = get_logger("api")


class FetchError(Exception):
    """The answer for one day could not be fetched or parsed."""


def answer_url(day: CalendarDay) -> str:
    return f"{API_BASE}/{day.iso()}.json"


def _get_solution(day: CalendarDay, session=None, timeout=None) -> str:
    http = session or requests
    try:
        resp = http.get(answer_url(day), timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as e:
        raise FetchError(str(e)) from e
    except ValueError as e:
        raise FetchError(f"invalid JSON: {e}") from e

    solution = data.get("solution") if isinstance(data, dict) else None
    if not isinstance(solution, str) or not solution:
        raise FetchError("response has no solution")
    return solution


def fetch_for_date(day: CalendarDay, session=None, timeout: Optional[float] = None) -> Optional[WordEntry]:
    """Fetch the answer for one day, or None if the request fails."""
    try:
        solution = _get_solution(day, session=session, timeout=timeout)
    except FetchError as e:
        logger.error(f"⚠️ Failed to fetch word for {day}: {e}")
        return None
    return WordEntry(date=day.iso(), solution=solution)

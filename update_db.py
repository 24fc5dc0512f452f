#!/usr/bin/env python3
"""
update_db.py — Wordle History Backfill
======================================
Fetches every Wordle answer missing from wordle-words.json, from the first
puzzle (2021-06-19) through today, and merges them into the local store.

Run it once by hand, or daily via cron:
  0 1 * * * cd /path/to/wordle-archiver && python3 update_db.py

Days that fail to fetch are skipped and retried on the next run.
"""

from __future__ import annotations

import time
from typing import Optional

import requests

import word_store
import wordle_api
from calendar_day import CalendarDay, span
from logging_config import get_logger, setup_logging
from settings import DEFAULT_REQUEST_DELAY, WORDS_FILE, get_settings

EPOCH = CalendarDay.from_iso("2021-06-19")

logger = get_logger("backfill")


def missing_days(present: set, today: CalendarDay) -> list:
    """Days from the epoch through today that are not in the store yet."""
    return [day for day in span(EPOCH, today) if day.iso() not in present]


def update_words(
    path,
    today: Optional[CalendarDay] = None,
    delay: float = DEFAULT_REQUEST_DELAY,
    timeout: Optional[float] = None,
) -> word_store.WordStore:
    """Fetch all missing answers and save the merged store."""
    logger.info("📥 Starting Wordle word update...")
    today = today or CalendarDay.today()

    store = word_store.load(path)
    todo = missing_days(store.dates(), today)
    logger.info(f"📂 Existing store: {len(store.words)} words, {len(todo)} days to fetch")

    new_words = []
    with requests.Session() as session:
        for day in todo:
            entry = wordle_api.fetch_for_date(day, session=session, timeout=timeout)
            if entry is None:
                continue
            new_words.append(entry)
            logger.info(f"  Fetched word for {entry.date}: {entry.solution}")
            time.sleep(delay)  # Be nice to the API

    store.merge(new_words)
    word_store.save(store, path)
    logger.info(f"✅ Words updated successfully: {len(store.words)} total words saved to {path}")

    latest = store.latest()
    if latest:
        logger.info(f"📅 Most recent: {latest.date} ({latest.solution})")
    return store


def main():
    settings = get_settings()
    setup_logging(settings.log_dir, settings.debug_mode)
    update_words(
        WORDS_FILE,
        today=CalendarDay.today(settings.timezone),
        delay=settings.request_delay,
        timeout=settings.request_timeout,
    )


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
poller.py — Daily Wordle Poller
===============================
Backfills the store once, then checks for today's answer on a fixed interval
while a countdown to the next check ticks on the console.

  python3 poller.py

Ctrl+C or SIGTERM shuts it down.
"""

from __future__ import annotations

import signal
import sys
import time
from typing import Optional

import update_db
import word_store
import wordle_api
from calendar_day import CalendarDay
from countdown import Countdown
from logging_config import get_logger, setup_logging
from settings import CHECK_INTERVAL, WORDS_FILE, get_settings

TICK_SECONDS = 1

logger = get_logger("poller")


def check_today(path, today: Optional[CalendarDay] = None, timeout: Optional[float] = None):
    """Fetch and store today's answer unless it is already stored."""
    today = today or CalendarDay.today()
    logger.info(f"🔎 Checking for word on {today}...")

    store = word_store.load(path)
    if store.has(today.iso()):
        logger.info("Today's word already fetched. Starting countdown for next check...")
        return None

    entry = wordle_api.fetch_for_date(today, timeout=timeout)
    if entry is None:
        return None

    store.merge([entry])
    word_store.save(store, path)
    logger.info(f"✅ Added new word for {entry.date}: {entry.solution}")
    return entry


class DailyPoller:
    """Runs check_today every interval and keeps the countdown in step with it."""

    def __init__(self, path, interval: float, countdown: Countdown = None,
                 tz_name: Optional[str] = None, timeout: Optional[float] = None,
                 clock=time.time, sleep=time.sleep):
        self.path = path
        self.interval = interval
        self.countdown = countdown or Countdown(clock=clock)
        self.tz_name = tz_name
        self.timeout = timeout
        self._clock = clock
        self._sleep = sleep
        self._running = False
        self.next_check = None

    def check(self):
        return check_today(self.path, today=CalendarDay.today(self.tz_name), timeout=self.timeout)

    def _schedule_next(self):
        """Advance next_check by whole intervals so the period does not drift."""
        now = self._clock()
        if self.next_check is None:
            self.next_check = now + self.interval
        while self.next_check <= now:
            self.next_check += self.interval
        self.countdown.restart(self.next_check)

    def _fire(self):
        self.countdown.stop()
        try:
            self.check()
        except Exception:
            # a failed cycle should not end the process
            logger.exception("Daily check failed")
        self._schedule_next()

    def run_forever(self):
        """Tick once a second until stop() is called."""
        self._running = True
        self.next_check = None
        self._schedule_next()
        while self._running:
            self._sleep(TICK_SECONDS)
            if not self._running:
                break
            now = self._clock()
            if now >= self.next_check:
                self._fire()
            else:
                self.countdown.tick(now)
        self.countdown.stop()

    def stop(self):
        self._running = False


def _handle_sigterm(signum, frame):
    raise KeyboardInterrupt


def main():
    settings = get_settings()
    setup_logging(settings.log_dir, settings.debug_mode)
    signal.signal(signal.SIGTERM, _handle_sigterm)

    poller = DailyPoller(
        WORDS_FILE,
        CHECK_INTERVAL,
        tz_name=settings.timezone,
        timeout=settings.request_timeout,
    )
    try:
        update_db.update_words(
            WORDS_FILE,
            today=CalendarDay.today(settings.timezone),
            delay=settings.request_delay,
            timeout=settings.request_timeout,
        )
        poller.check()
        poller.run_forever()
    except KeyboardInterrupt:
        poller.countdown.stop()
        logger.info("Shutting down...")
    sys.exit(0)


if __name__ == "__main__":
    main()

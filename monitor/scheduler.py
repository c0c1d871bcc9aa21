"""Background scheduler for the periodic update cycle."""
import logging
import threading
import schedule
import time

from utils.constants import UPDATE_INTERVAL

logger = logging.getLogger("btctarget.scheduler")


class TrackerScheduler:
    def __init__(self, tracker, interval_seconds=UPDATE_INTERVAL):
        self.tracker = tracker
        self.interval = interval_seconds
        self._scheduler = schedule.Scheduler()
        self._thread = None
        self._running = False
        self._consecutive_failures = 0

    def start(self):
        """Start background updates. The first cycle runs immediately."""
        if self._running:
            return
        self._running = True

        self._scheduler.every(self.interval).seconds.do(self._update_job)

        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()
        logger.info(f"Scheduler started (every {self.interval}s)")

    def stop(self):
        """Stop background updates."""
        self._running = False
        self._scheduler.clear()
        if self._thread:
            self._thread.join(timeout=5)
            self._thread = None
        logger.info("Scheduler stopped")

    @property
    def running(self):
        return self._running

    def _run_loop(self):
        self._update_job()
        while self._running:
            self._scheduler.run_pending()
            time.sleep(1)

    def _update_job(self):
        try:
            ok = self.tracker.run_cycle()
        except Exception as e:
            logger.exception(f"Update cycle crashed: {e}")
            ok = False

        if ok:
            self._consecutive_failures = 0
            return
        if self.tracker.state.in_flight:
            return
        self._consecutive_failures += 1
        if self._consecutive_failures >= 5:
            logger.critical(f"{self._consecutive_failures} consecutive update failures")

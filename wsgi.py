"""WSGI entry point for production deployment."""
import atexit
import sys
import os
import logging
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).parent))

from config import load_config
from utils.logger import setup_logging
from models.database import Database
from monitor.api import build_client
from monitor.highs import HighsLedger
from monitor.tracker import TargetTracker
from monitor.scheduler import TrackerScheduler
from web.app import create_app

logger = logging.getLogger("btctarget.wsgi")

config = load_config(os.environ.get("BTC_TARGET_CONFIG"))
setup_logging(config["logging"].get("level", "INFO"), config["logging"].get("file"))

db = Database(config["database"]["path"])
db.connect()

api = build_client(config)
tracker = TargetTracker(api, HighsLedger(db))
scheduler = TrackerScheduler(tracker, tracker.target.interval_seconds)

app = create_app(config, {"tracker": tracker, "scheduler": scheduler})

# Load the ledger and history, then start polling so the page has data
try:
    tracker.start()
except Exception as e:
    logger.warning(f"Startup load failed (scheduler will keep polling): {e}")
scheduler.start()


@atexit.register
def _shutdown():
    scheduler.stop()
    api.close()
    db.close()

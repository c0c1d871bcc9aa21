"""Yearly highs ledger: the ten highest new-high events of the target year."""
import json
import logging
import sqlite3

from models.tracker import HighRecord
from utils.constants import DEFAULT_TARGET, LEDGER_KEY, MAX_HIGH_RECORDS
from utils.errors import PersistenceCorrupt

logger = logging.getLogger("btctarget.highs")


class HighsLedger:
    """Capped, price-sorted list of high-water marks, persisted as one JSON blob.

    The running max is cached next to the records and only moves when a new
    high is recorded, so checks never rescan the list.
    """

    def __init__(self, store, target=DEFAULT_TARGET, key=LEDGER_KEY, limit=MAX_HIGH_RECORDS):
        self.store = store
        self.target = target
        self.key = key
        self.limit = limit
        self.records = []
        self.running_max = 0.0

    def load(self):
        """Read the persisted ledger. A corrupt blob loads as an empty ledger."""
        try:
            self.records = self._decode(self.store.get_item(self.key))
        except PersistenceCorrupt as e:
            logger.warning(f"Ignoring stored highs ledger: {e}")
            self.records = []

        self.running_max = max((r.price for r in self.records), default=0.0)
        logger.info(f"Loaded {len(self.records)} high records (max ${self.running_max:,.2f})")
        return self.records

    def _decode(self, raw):
        if raw is None:
            return []
        try:
            items = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise PersistenceCorrupt(f"unparseable JSON: {e}") from e
        if not isinstance(items, list):
            raise PersistenceCorrupt(f"expected a list, got {type(items).__name__}")
        try:
            records = [HighRecord.from_dict(item) for item in items]
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceCorrupt(f"malformed record: {e}") from e
        records.sort(key=lambda r: r.price, reverse=True)
        return records[:self.limit]

    def save(self, records=None):
        records = self.records if records is None else records
        payload = json.dumps([r.to_dict() for r in records])
        self.store.set_item(self.key, payload)

    def record_if_high(self, price, now):
        """Record `price` if it beats the running max of the target year.

        Returns the new HighRecord, or None when nothing changed. A failed write
        leaves the ledger untouched so the same price is tried again next cycle.
        """
        if now.year != self.target.year:
            return None
        if price <= self.running_max:
            return None

        record = HighRecord.at(price, now)
        records = sorted(self.records + [record], key=lambda r: r.price, reverse=True)[:self.limit]
        try:
            self.save(records)
        except (sqlite3.Error, OSError) as e:
            logger.warning(f"Could not persist new high ${price:,.2f}: {e}")
            return None

        self.records = records
        self.running_max = record.price

        logger.info(f"New {self.target.year} high: ${price:,.2f}")
        return record

    def clear(self):
        self.records = []
        self.running_max = 0.0
        self.save()

    def __len__(self):
        return len(self.records)

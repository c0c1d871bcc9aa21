"""Data models."""
from models.tracker import PriceQuote, HistoricalSample, HighRecord, ProgressStats, DisplayState
from models.database import Database

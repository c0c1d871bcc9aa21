"""Dashboard color theme and styles."""
from rich.theme import Theme

BTC_ORANGE = "#F7931A"
HIST_BLUE = "#667EEA"
PROJ_RED = "#E74C3C"
TARGET_GREEN = "#27AE60"
TEXT_DIM = "#888888"

DASHBOARD_THEME = Theme({
    "btc": f"bold {BTC_ORANGE}",
    "dim": f"{TEXT_DIM}",
    "error": "bold white on red",
    "header": f"bold {BTC_ORANGE}",
})

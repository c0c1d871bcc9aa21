"""Header panel - title bar."""
from datetime import datetime
from rich.panel import Panel
from rich.text import Text
from rich.columns import Columns
from dashboard.widgets import data_age_indicator


class HeaderPanel:
    @staticmethod
    def render(target=None, last_update=None):
        title = Text("  BITCOIN TARGET TRACKER  ", style="bold white on #F7931A")
        now = datetime.now().strftime("%Y-%m-%d %H:%M")
        goal = f"${target.price:,.0f} by {target.date.date()}" if target else "..."

        right = Text(f"{now}  |  {goal}  |  ", style="dim")

        return Panel(
            Columns([title, right, Text.from_markup(data_age_indicator(last_update))], expand=True),
            style="bold #F7931A",
            height=3,
        )

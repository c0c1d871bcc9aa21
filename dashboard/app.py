"""Terminal dashboard application."""
import logging
import time
from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from dashboard.panels import (
    HeaderPanel, PricePanel, ProgressPanel, ChartPanel, HighsPanel, FooterPanel,
)
from dashboard.theme import DASHBOARD_THEME
from monitor.tracker import DisplaySink

logger = logging.getLogger("btctarget.dashboard")


class Dashboard(DisplaySink):
    """Rich live layout fed by the tracker's display hooks."""

    def __init__(self, tracker, console=None):
        self.tracker = tracker
        self.refresh_interval = tracker.target.interval_seconds
        self._running = False
        self._console = console or Console(theme=DASHBOARD_THEME)
        self._layout = self._build_layout()
        self._display = None
        self._chart = None

    def _build_layout(self):
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="upper", ratio=2),
            Layout(name="lower", ratio=3),
            Layout(name="footer", size=3),
        )
        layout["upper"].split_row(
            Layout(name="price", ratio=1),
            Layout(name="progress", ratio=1),
        )
        layout["lower"].split_row(
            Layout(name="chart", ratio=2),
            Layout(name="highs", ratio=1),
        )
        return layout

    # ─── DisplaySink hooks ───────────────────────────────

    def show(self, display):
        self._display = display
        self._render_panels()

    def render_chart(self, snapshot):
        self._chart = snapshot
        self._layout["chart"].update(ChartPanel.render(snapshot))

    def celebrate(self, achieved_at, price):
        self._console.bell()

    def notify_new_high(self, record):
        self._console.bell()

    # ─── Rendering ───────────────────────────────────────

    def _render_panels(self):
        display = self._display
        layout = self._layout
        layout["header"].update(HeaderPanel.render(self.tracker.target, self.tracker.state.last_update))
        layout["price"].update(PricePanel.render(display))
        layout["progress"].update(ProgressPanel.render(display))
        layout["chart"].update(ChartPanel.render(self._chart))
        layout["highs"].update(HighsPanel.render(
            display.highs if display else None,
            self.tracker.target.year,
            display.new_high_text if display else None,
        ))
        layout["footer"].update(FooterPanel.render(
            display.last_update_text if display else None,
            self.refresh_interval,
            display.error if display else None,
        ))

    def run(self):
        """Launch the live terminal dashboard."""
        self._running = True
        self.tracker.add_sink(self)

        self._console.print("[bold #F7931A]Starting Bitcoin Target Tracker...[/bold #F7931A]")
        try:
            self.tracker.start()
        except Exception as e:
            logger.warning(f"Startup load failed: {e}")

        try:
            with Live(self._layout, console=self._console, refresh_per_second=1, screen=True):
                while self._running:
                    try:
                        self.tracker.run_cycle()
                    except Exception as e:
                        logger.exception(f"Update cycle crashed: {e}")
                    time.sleep(self.refresh_interval)
        except KeyboardInterrupt:
            pass
        finally:
            self._running = False
            self._console.clear()
            quote = self.tracker.state.quote
            price = quote.price if quote else 0
            self._console.print(f"[dim]Session ended. Last BTC: ${price:,.2f}[/dim]")

    def quick_status(self):
        """Return single-line status string."""
        display = self.tracker.state.display
        if display.error:
            return f"BTC: {display.error}"
        if display.days_remaining is None:
            return "BTC: No data available"
        return (
            f"BTC {display.price_text} ({display.change_text} 24h) | "
            f"{display.completion_rate_text} of ${self.tracker.target.price:,.0f} | "
            f"{display.days_remaining}d left | needs {display.daily_growth_text}/day"
        )

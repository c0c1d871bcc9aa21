"""Chart panel - the three series as sparklines on a shared scale."""
from rich.panel import Panel
from rich.table import Table
from dashboard.widgets import sparkline
from dashboard.theme import HIST_BLUE, PROJ_RED, TARGET_GREEN
from web.chart_data import SERIES_LABELS


class ChartPanel:
    @staticmethod
    def render(snapshot=None):
        if snapshot is None:
            return Panel("[dim]Awaiting data...[/dim]", title="Chart", border_style="cyan")

        series = [
            ("historical", snapshot.historical, HIST_BLUE),
            ("projected", snapshot.projected, PROJ_RED),
            ("target", snapshot.target, TARGET_GREEN),
        ]
        values = [v for _, data, _ in series for v in data if v is not None]
        lo = min(values) if values else None
        hi = max(values) if values else None
        width = len(snapshot.labels)

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("series", style="dim", width=18)
        table.add_column("sparkline")
        table.add_column("last", width=12)

        for key, data, color in series:
            known = [v for v in data if v is not None]
            last = f"${known[-1]:,.0f}" if known else "N/A"
            table.add_row(SERIES_LABELS[key], f"[{color}]{sparkline(list(data), width, lo, hi)}[/{color}]", last)

        span = f"{snapshot.labels[0]} → {snapshot.labels[-1]}"
        table.add_row("", f"[dim]{span}[/dim]", "")

        return Panel(table, title="[bold cyan]Price vs Target[/bold cyan]", border_style="cyan")

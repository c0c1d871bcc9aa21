"""Progress panel - bar toward the target plus the derived stats."""
from rich.panel import Panel
from rich.table import Table
from dashboard.widgets import target_progress_bar


class ProgressPanel:
    @staticmethod
    def render(display=None):
        if display is None or display.days_remaining is None:
            return Panel("[dim]Awaiting data...[/dim]", title="Progress", border_style="magenta")

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("label", style="dim", width=16)
        table.add_column("value")

        table.add_row("", target_progress_bar(display.bar_width_pct))
        table.add_row("Completion", f"[bold]{display.completion_rate_text}[/bold]")
        table.add_row("Days Remaining", str(display.days_remaining))
        table.add_row("Daily Growth", display.daily_growth_text)
        table.add_row("Monthly Growth", display.monthly_growth_text)

        if display.celebrating:
            table.add_row("", f"[bold green]TARGET REACHED[/bold green] [dim]{display.achieved_at_text or ''}[/dim]")

        return Panel(table, title="[bold magenta]Progress[/bold magenta]", border_style="magenta")

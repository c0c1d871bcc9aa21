"""Yearly highs panel."""
from rich.panel import Panel
from rich.table import Table
from utils.constants import NO_HIGHS_MESSAGE


class HighsPanel:
    @staticmethod
    def render(highs=None, year=None, new_high_text=None):
        title = f"[bold yellow]{year} Highs[/bold yellow]" if year else "[bold yellow]Highs[/bold yellow]"
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("date", style="dim")
        table.add_column("price", justify="right")

        if new_high_text:
            table.add_row(f"[bold yellow]{new_high_text}[/bold yellow]", "")

        if not highs:
            table.add_row(f"[dim]{NO_HIGHS_MESSAGE}[/dim]", "")
        else:
            for i, high in enumerate(highs, start=1):
                style = "bold yellow" if i == 1 else "white"
                table.add_row(f"{i:>2}. {high['date']}", f"[{style}]{high['price']}[/{style}]")

        return Panel(table, title=title, border_style="yellow")

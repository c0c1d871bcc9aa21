"""Price panel - current price and 24h change."""
from rich.panel import Panel
from rich.table import Table


class PricePanel:
    @staticmethod
    def render(display=None):
        if display is None or display.price_text == "--":
            if display is not None and display.error:
                return Panel(f"[bold white on red]{display.error}[/bold white on red]", title="Price", border_style="red")
            return Panel("[dim]Awaiting data...[/dim]", title="Price", border_style="yellow")

        change_color = "green" if display.change_class == "positive" else "red"

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("label", style="dim", width=12)
        table.add_column("value", style="bold")

        table.add_row("Price", f"[bold white]{display.price_text}[/bold white]")
        table.add_row("24h", f"[{change_color}]{display.change_text}[/{change_color}]")
        table.add_row("To target", display.price_gap_text)
        if display.error:
            table.add_row("Status", f"[bold white on red]{display.error}[/bold white on red]")

        return Panel(table, title="[bold #F7931A]Price[/bold #F7931A]", border_style="#F7931A")

"""Footer panel - status bar."""
from rich.panel import Panel
from rich.text import Text


class FooterPanel:
    @staticmethod
    def render(last_update_text=None, next_update_in=None, error=None):
        parts = []

        if last_update_text:
            parts.append(f"Last update: {last_update_text}")
        if next_update_in:
            parts.append(f"[dim]Next update: {next_update_in}s[/dim]")
        if error:
            parts.append(f"[red]● {error}[/red]")
        else:
            parts.append("[green]●[/green] CoinGecko")

        parts.append("[dim]Ctrl+C: quit[/dim]")

        return Panel(
            Text.from_markup("  |  ".join(parts)),
            style="dim",
            height=3,
        )

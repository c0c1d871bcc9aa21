#!/usr/bin/env python3
"""Bitcoin Target Tracker - CLI Entry Point."""
import sys
import json
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import click
from rich.console import Console
from rich.table import Table

from __version__ import __version__

console = Console()
logger = logging.getLogger("btctarget.cli")


def _init_components(config_path=None, verbose=False):
    """Lazy initialization of all components."""
    from utils.logger import setup_logging
    from config import load_config
    from models.database import Database
    from monitor.api import build_client
    from monitor.highs import HighsLedger
    from monitor.tracker import TargetTracker

    config = load_config(config_path)
    log_cfg = config.get("logging", {})
    setup_logging("DEBUG" if verbose else log_cfg.get("level", "INFO"), log_cfg.get("file"))

    db = Database(config["database"]["path"])
    db.connect()

    api = build_client(config)
    ledger = HighsLedger(db)
    tracker = TargetTracker(api, ledger)

    return {"config": config, "db": db, "api": api, "ledger": ledger, "tracker": tracker}


@click.group()
@click.option("--config", "config_path", default=None, help="Path to config YAML")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="btctarget")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Bitcoin Target Tracker - live progress toward a fixed price target."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


def _close_components(c):
    c["api"].close()
    c["db"].close()


def _get_components(ctx):
    if "_components" not in ctx.obj:
        c = _init_components(ctx.obj.get("config_path"), ctx.obj.get("verbose"))
        ctx.obj["_components"] = c
        ctx.call_on_close(lambda: _close_components(c))
    return ctx.obj["_components"]


def _start_tracker(tracker):
    """Initial ledger + history load. A failure here leaves the tracker empty, not dead."""
    try:
        tracker.start()
    except Exception as e:
        logger.warning(f"Startup load failed: {e}")


# ──────────────────────────────────────────────────────
# STATUS
# ──────────────────────────────────────────────────────
@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--short", is_flag=True, help="One-line summary")
@click.pass_context
def status(ctx, as_json, short):
    """Run one update cycle and print the dashboard values."""
    c = _get_components(ctx)
    tracker = c["tracker"]
    _start_tracker(tracker)
    ok = tracker.run_cycle()
    display = tracker.state.display

    if short:
        from dashboard.app import Dashboard
        click.echo(Dashboard(tracker, console=console).quick_status())
        if not ok:
            ctx.exit(1)
        return

    if as_json:
        click.echo(json.dumps(display.to_dict(), indent=2, default=str))
        if not ok:
            ctx.exit(1)
        return

    if not ok:
        console.print(f"[red]{display.error}[/red]")
        ctx.exit(1)

    change_color = "green" if display.change_class == "positive" else "red"
    console.print(f"[bold #F7931A]BTC[/bold #F7931A] {display.price_text} "
                  f"([{change_color}]{display.change_text}[/{change_color}])")
    console.print(f"  Target:          ${tracker.target.price:,.0f} by {tracker.target.date.date()}")
    console.print(f"  Remaining:       {display.price_gap_text}")
    console.print(f"  Completion:      {display.completion_rate_text}")
    console.print(f"  Days remaining:  {display.days_remaining}")
    console.print(f"  Daily growth:    {display.daily_growth_text}")
    console.print(f"  Monthly growth:  {display.monthly_growth_text}")
    if display.celebrating:
        console.print(f"  [bold green]Target reached![/bold green] {display.achieved_at_text}")
    if display.new_high_text:
        console.print(f"  [bold yellow]{display.new_high_text}[/bold yellow]")
    console.print(f"  [dim]Updated {display.last_update_text}[/dim]")


# ──────────────────────────────────────────────────────
# HIGHS
# ──────────────────────────────────────────────────────
@cli.group()
def highs():
    """Yearly highs ledger."""
    pass


@highs.command("list")
@click.pass_context
def highs_list(ctx):
    """Show the recorded yearly highs."""
    c = _get_components(ctx)
    ledger = c["ledger"]
    ledger.load()

    if not ledger.records:
        console.print("[dim]No highs recorded yet.[/dim]")
        return

    from utils.formatters import format_usd, format_high_date
    table = Table(title=f"{ledger.target.year} Highs")
    table.add_column("#", justify="right")
    table.add_column("Date")
    table.add_column("Price", justify="right", style="bold #F7931A")
    for i, record in enumerate(ledger.records, start=1):
        table.add_row(str(i), format_high_date(record.date), format_usd(record.price))
    console.print(table)


@highs.command("clear")
@click.confirmation_option(prompt="Delete all recorded highs?")
@click.pass_context
def highs_clear(ctx):
    """Delete all recorded highs."""
    c = _get_components(ctx)
    c["ledger"].clear()
    console.print("[green]✓[/green] Highs ledger cleared")


# ──────────────────────────────────────────────────────
# CHART
# ──────────────────────────────────────────────────────
@cli.command()
@click.option("--output", default="data/price_target.png", help="Output PNG path")
@click.option("--open", "open_file", is_flag=True, help="Open chart after generating")
@click.pass_context
def chart(ctx, output, open_file):
    """Export the price/target chart as a PNG."""
    c = _get_components(ctx)
    from web.export import export_chart_png

    tracker = c["tracker"]
    console.print("[dim]Fetching latest price...[/dim]")
    _start_tracker(tracker)
    if not tracker.run_cycle():
        console.print(f"[red]{tracker.state.display.error}[/red] - chart shows the target only")

    quote = tracker.state.quote
    path = export_chart_png(tracker.state.chart, output, quote.price if quote else None)
    console.print(f"[green]✓[/green] Chart: {path}")
    if open_file:
        click.launch(str(path))


# ──────────────────────────────────────────────────────
# WEB / DASHBOARD
# ──────────────────────────────────────────────────────
@cli.command()
@click.option("--port", default=None, type=int, help="Port (default from config)")
@click.option("--host", default=None, help="Host (default from config)")
@click.pass_context
def web(ctx, port, host):
    """Launch the web dashboard."""
    from web.app import create_app
    from monitor.scheduler import TrackerScheduler

    c = _get_components(ctx)
    web_cfg = c["config"].get("web", {})
    port = port or web_cfg.get("port", 5000)
    host = host or web_cfg.get("host", "127.0.0.1")

    tracker = c["tracker"]
    _start_tracker(tracker)
    scheduler = TrackerScheduler(tracker, tracker.target.interval_seconds)
    app = create_app(c["config"], {"tracker": tracker, "scheduler": scheduler})

    console.print(f"\n[bold #F7931A]Bitcoin Target Tracker -- Web Dashboard[/bold #F7931A]\n")
    console.print(f"  Local:    http://{host}:{port}")
    console.print(f"  Refresh:  every {tracker.target.interval_seconds}s")
    console.print(f"\n  Press Ctrl+C to stop.\n")

    scheduler.start()
    try:
        app.run(host=host, port=port, debug=False)
    finally:
        scheduler.stop()


@cli.command()
@click.pass_context
def dashboard(ctx):
    """Launch the terminal dashboard."""
    c = _get_components(ctx)
    from dashboard.app import Dashboard
    Dashboard(c["tracker"]).run()


if __name__ == "__main__":
    cli()

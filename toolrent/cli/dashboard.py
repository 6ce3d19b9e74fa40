"""Dashboard command."""
import click
import requests

from toolrent.config import config
from toolrent.cli.common import console, get_api_client, print_stats
from toolrent.utils.dashboard import compute_stats, recent_activity
from toolrent.utils.dates import time_ago, utc_now

ACTIVITY_LABELS = {
    "rental": ("green", "Rented"),
    "return": ("blue", "Returned"),
    "overdue": ("red", "Overdue"),
}


@click.command(name="dashboard")
@click.option("--days", default=None, type=int, help="Activity window in days (default: from config)")
@click.option("--limit", default=None, type=int, help="Maximum activity entries (default: from config)")
def show_dashboard(days, limit):
    """Show rental statistics and recent activity."""
    api = get_api_client()

    try:
        tools = api.list_tools()
        orders = api.list_orders()
    except requests.RequestException as e:
        console.print(f"[red]Failed to load dashboard data: {e}[/red]")
        raise click.Abort()

    now = utc_now()
    print_stats(compute_stats(tools, orders, now))

    activities = recent_activity(
        orders,
        now,
        window_days=days or config.activity_window_days,
        limit=limit or config.activity_limit,
    )

    console.print("\n[bold cyan]Recent Activity[/bold cyan]")
    if not activities:
        console.print("[dim]No recent activity[/dim]")
        return

    for item in activities:
        color, label = ACTIVITY_LABELS[item.type]
        console.print(
            f"[{color}]{label}[/{color}] {item.tool_name} - {item.user_name} "
            f"[dim]{time_ago(item.timestamp, now)}[/dim]"
        )

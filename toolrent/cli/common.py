"""Shared utilities for CLI commands."""
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from toolrent.config import config
from toolrent.api.client import RentalAPIClient
from toolrent.utils.dates import format_date
from toolrent.utils.orders import format_expiry_date, order_state

# Global console for consistent output
console = Console()

STATE_STYLES = {"RETURNED": "blue", "OVERDUE": "red", "ACTIVE": "green"}


def setup_logging(verbose=False):
    """Route log records through rich at the configured level."""
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(
        level=level,
        format=config.log_format,
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def get_api_client(base_url=None):
    """Get initialized rental API client."""
    return RentalAPIClient(base_url or config.api_base_url)


def state_badge(order, now=None):
    state = order_state(order, now)
    return f"[{STATE_STYLES[state]}]{state}[/{STATE_STYLES[state]}]"


def orders_table(orders, title="Rentals", now=None):
    """Render orders the way the history list shows them."""
    table = Table(title=title, show_lines=False)
    table.add_column("Order")
    table.add_column("Tool")
    table.add_column("Assigned By")
    table.add_column("Assigned To")
    table.add_column("Start")
    table.add_column("Due")
    table.add_column("Returned")
    table.add_column("Status")

    for order in orders:
        customer = order.customer.name
        if order.customer.company_name:
            customer = f"{customer} ({order.customer.company_name})"
        table.add_row(
            order.order_id,
            order.tool_name,
            order.assigner.name,
            customer,
            format_date(order.created_at),
            format_expiry_date(order, now),
            format_date(order.return_date) if order.return_date else "-",
            state_badge(order, now),
        )
    return table


def print_tool_summary(tool):
    """Print tool details in consistent format."""
    console.print(f"[bold]Tool:[/bold] {tool.name}")
    console.print(f"[bold]NFC ID:[/bold] {tool.nfc_id}")
    if tool.price is not None:
        console.print(f"[bold]Price:[/bold] {tool.price}")
    console.print(f"[bold]Status:[/bold] {tool.status or 'unknown'}")
    if tool.image:
        console.print(f"[bold]Image:[/bold] {tool.image}")


def print_stats(stats):
    """Print dashboard statistics."""
    console.print("\n[bold cyan]Dashboard[/bold cyan]")
    console.print("=" * 60)
    console.print(f"Tools in use: {stats.tools_in_use}")
    console.print(f"Available tools: {stats.available_tools}")
    console.print(f"Overdue rentals: {stats.overdue_rentals}")
    console.print("=" * 60)

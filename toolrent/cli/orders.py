"""Rental history, assignment and return commands."""
import logging

import click
import requests

from toolrent.config import config
from toolrent.cli.common import console, get_api_client, orders_table
from toolrent.models.filters import FilterCriteria, SortSpec, SORT_DIRECTIONS, SORT_FIELDS, STATUS_FILTERS
from toolrent.utils.dates import utc_now
from toolrent.utils.orders import build_filter_options, filter_and_sort_orders, option_label
from toolrent.utils.users import find_admin, generate_order_id

logger = logging.getLogger(__name__)


def _load_orders(api):
    try:
        return api.list_orders()
    except requests.RequestException as e:
        console.print(f"[red]Failed to load orders: {e}[/red]")
        raise click.Abort()


@click.command(name="history")
@click.option("--user", default="all", help="Assigner id to filter on (default: all)")
@click.option("--customer", default="all", help="Customer id to filter on (default: all)")
@click.option("--tool", default="all", help="Exact tool name to filter on (default: all)")
@click.option("--status", type=click.Choice(STATUS_FILTERS), default="all", help="Rental status")
@click.option("--sort-by", type=click.Choice(SORT_FIELDS), default="toolName", help="Sort field")
@click.option("--order", "direction", type=click.Choice(SORT_DIRECTIONS), default="asc", help="Sort direction")
def history(user, customer, tool, status, sort_by, direction):
    """List rentals with optional filters and sorting."""
    api = get_api_client()
    orders = _load_orders(api)
    logger.debug("Loaded %d orders", len(orders))

    criteria = FilterCriteria(user=user, customer=customer, tool=tool, status=status)
    sort = SortSpec(field=sort_by, direction=direction)
    now = utc_now()

    options = build_filter_options(orders)
    console.print(
        f"[dim]Assigned By: {option_label(options.users, criteria.user)} | "
        f"Assigned To: {option_label(options.customers, criteria.customer)} | "
        f"Status: {option_label(options.statuses, criteria.status)} | "
        f"Tool: {option_label(options.tools, criteria.tool)}[/dim]"
    )

    filtered = filter_and_sort_orders(orders, criteria, sort, now)
    if not filtered:
        console.print("[yellow]No rentals found[/yellow]")
        return

    console.print(orders_table(filtered, now=now))
    console.print(f"\n[bold]Total:[/bold] {len(filtered)} of {len(orders)} rentals")


@click.command(name="filter-options")
def filter_options():
    """Show the values available for each history filter."""
    api = get_api_client()
    options = build_filter_options(_load_orders(api))

    sections = [
        ("Assigned By", options.users),
        ("Assigned To", options.customers),
        ("Status", options.statuses),
        ("Tool", options.tools),
    ]
    for title, entries in sections:
        console.print(f"\n[bold cyan]{title}[/bold cyan]")
        for option in entries:
            console.print(f"  {option.label} [dim]({option.value})[/dim]")


@click.command(name="assign")
@click.argument("nfc_id")
@click.option("--customer", "customer_id", required=True, help="Customer id receiving the tool")
@click.option("--duration", required=True, type=click.IntRange(min=1), help="Rental length in days")
@click.option("--assigned-by", default=None, help="Admin name creating the rental (default: from config)")
def assign(nfc_id, customer_id, duration, assigned_by):
    """Assign a scanned tool to a customer."""
    api = get_api_client()
    admin_name = assigned_by or config.default_admin_name

    try:
        tool = api.scan_tool(nfc_id)
        if tool is None:
            console.print(f"[red]Tool not found: {nfc_id}[/red]")
            console.print(f"[dim]Register it with: toolrent tools add --nfc-id {nfc_id}[/dim]")
            raise click.Abort()

        admin = find_admin(api.list_users(), admin_name)
        if admin is None:
            console.print(f"[red]No admin user named '{admin_name}'[/red]")
            raise click.Abort()

        order_id = generate_order_id()
        console.print(f"[bold]Tool:[/bold] {tool.name}")
        console.print(f"[bold]Duration:[/bold] {duration} day{'s' if duration != 1 else ''}")

        response = api.create_order(
            nfc_id=tool.nfc_id or nfc_id,
            customer_id=customer_id,
            user_id=admin.id,
            time_duration=duration,
            order_id=order_id,
            tool_name=tool.name,
        )
        logger.debug("Order created: %s", response)
    except requests.RequestException as e:
        console.print(f"[red]Failed to assign tool: {e}[/red]")
        raise click.Abort()

    console.print("[green]Tool assigned successfully![/green]")
    console.print(f"[bold]Order ID:[/bold] {order_id}")


@click.command(name="return")
@click.argument("order_id")
def return_tool(order_id):
    """Mark an order as returned."""
    api = get_api_client()

    try:
        api.return_order(order_id)
    except requests.RequestException as e:
        console.print(f"[red]Failed to mark order as returned: {e}[/red]")
        raise click.Abort()

    console.print(f"[green]Order {order_id} marked as returned[/green]")

"""Tool inventory commands."""
import click
import requests
from rich.table import Table

from toolrent.cli.common import console, get_api_client, print_tool_summary


@click.group(name="tools")
def tools_group():
    """Tool inventory commands."""
    pass


@tools_group.command(name="list")
@click.option("--available", is_flag=True, help="Only show tools that can be rented")
def list_tools(available):
    """List registered tools."""
    api = get_api_client()
    try:
        tools = api.list_tools()
    except requests.RequestException as e:
        console.print(f"[red]Failed to load tools: {e}[/red]")
        raise click.Abort()

    if available:
        tools = [tool for tool in tools if tool.is_available]

    if not tools:
        console.print("[yellow]No tools found[/yellow]")
        return

    table = Table(title="Tools")
    table.add_column("NFC ID")
    table.add_column("Name")
    table.add_column("Price", justify="right")
    table.add_column("Status")
    for tool in tools:
        table.add_row(
            tool.nfc_id,
            tool.name,
            "" if tool.price is None else str(tool.price),
            tool.status or "unknown",
        )
    console.print(table)


@tools_group.command(name="scan")
@click.argument("nfc_id")
def scan(nfc_id):
    """Look up a tool by its NFC tag."""
    api = get_api_client()
    try:
        tool = api.scan_tool(nfc_id)
    except requests.RequestException as e:
        console.print(f"[red]Scan failed: {e}[/red]")
        raise click.Abort()

    if tool is None:
        console.print(f"[yellow]New tool detected: {nfc_id}[/yellow]")
        console.print(f"[dim]Register it with: toolrent tools add --nfc-id {nfc_id} --name NAME --price PRICE[/dim]")
        return

    console.print("\n[bold cyan]Tool Details[/bold cyan]")
    console.print("=" * 60)
    print_tool_summary(tool)
    if tool.is_available:
        console.print(f"\n[dim]Assign it with: toolrent assign {tool.nfc_id} --customer ID --duration DAYS[/dim]")


@tools_group.command(name="add")
@click.option("--nfc-id", required=True, help="NFC tag id")
@click.option("--name", required=True, help="Tool name")
@click.option("--price", required=True, type=float, help="Rental price")
@click.option("--image", default="default.jpg", help="Image reference (default: default.jpg)")
def add_tool(nfc_id, name, price, image):
    """Register a new tool."""
    if not nfc_id.strip() or not name.strip():
        raise click.UsageError("NFC ID and name are required")
    if price <= 0:
        raise click.BadParameter("price must be positive", param_hint="--price")

    api = get_api_client()
    try:
        api.add_tool(nfc_id.strip(), name.strip(), price, image)
    except requests.RequestException as e:
        console.print(f"[red]Failed to add tool: {e}[/red]")
        raise click.Abort()

    console.print(f"[green]Tool added successfully:[/green] {name.strip()} ({nfc_id.strip()})")

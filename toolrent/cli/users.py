"""User management commands."""
import click
import requests
from rich.table import Table

from toolrent.cli.common import console, get_api_client
from toolrent.models.user import ADMIN_ROLE, CUSTOMER_ROLE
from toolrent.utils.users import search_users, select_customers


@click.group(name="users")
def users_group():
    """User management commands."""
    pass


@users_group.command(name="list")
@click.option("--customers", "customers_only", is_flag=True, help="Only show users that can receive tools")
@click.option("--search", default=None, help="Filter by name or company")
def list_users(customers_only, search):
    """List users."""
    api = get_api_client()
    try:
        users = api.list_users()
    except requests.RequestException as e:
        console.print(f"[red]Failed to load users: {e}[/red]")
        raise click.Abort()

    if customers_only:
        users = select_customers(users)
    users = search_users(users, search)

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Company")
    table.add_column("Role")
    for user in users:
        table.add_row(user.id, user.name, user.company_name, user.role or "-")
    console.print(table)


@users_group.command(name="add")
@click.option("--name", required=True, help="Full name")
@click.option("--company", required=True, help="Company name")
@click.option("--role", type=click.Choice([CUSTOMER_ROLE, ADMIN_ROLE]), default=CUSTOMER_ROLE)
def add_user(name, company, role):
    """Add a customer or admin."""
    if not name.strip() or not company.strip():
        raise click.UsageError("Please fill in all fields")

    api = get_api_client()
    try:
        api.add_user(name.strip(), company.strip(), role)
    except requests.RequestException as e:
        console.print(f"[red]Failed to add user: {e}[/red]")
        raise click.Abort()

    console.print(f"[green]User added successfully:[/green] {name.strip()}")

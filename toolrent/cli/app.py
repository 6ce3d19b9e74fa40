"""Main CLI application entry point."""
import click
from toolrent import __version__
from toolrent.cli.common import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose):
    """toolrent - track tool rentals from the command line."""
    ctx.ensure_object(dict)
    setup_logging(verbose)


# Import command modules
from toolrent.cli import dashboard, orders, tools, users

# Register command groups
cli.add_command(dashboard.show_dashboard)
cli.add_command(orders.history)
cli.add_command(orders.filter_options)
cli.add_command(orders.assign)
cli.add_command(orders.return_tool)
cli.add_command(tools.tools_group)
cli.add_command(users.users_group)


if __name__ == "__main__":
    cli()

"""
muko 命令行入口
"""

import sys

import click

from muko.app import MukoApp
from muko.config import Config
from muko.errors import MukoError
from muko.table import render_table


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _print_report(app: MukoApp) -> None:
    """打印当前所有管理条目"""
    try:
        entries = app.report()
    except (MukoError, OSError) as e:
        _fail(e)
    click.echo("Muko-managed domains:")
    click.echo(render_table(entries))


@click.group(invoke_without_command=True)
@click.option(
    "--hosts-file",
    default=None,
    help="Path to hosts file (default: $MUKO_HOSTS_FILE or the system hosts file)",
)
@click.pass_context
def cli(ctx, hosts_file):
    """A command-line utility to manage host file entries"""
    try:
        config = Config.from_env()
        if hosts_file:
            config.hosts_file_path = hosts_file
        ctx.obj = MukoApp(config)
    except ValueError as e:
        raise click.UsageError(str(e))

    if ctx.invoked_subcommand is None:
        _print_report(ctx.obj)


@cli.command()
@click.argument("domain_name")
@click.option("--ip", default=None, help="IP address (defaults to 127.0.0.1)")
@click.option("--alias", default=None, help="Alias for the domain (defaults to domain_name)")
@click.pass_obj
def add(app, domain_name, ip, alias):
    """Add a domain to the hosts file"""
    try:
        result = app.add(domain_name, ip, alias)
    except (MukoError, OSError) as e:
        _fail(e)

    if result.replaced:
        click.echo(f"✓ Domain '{domain_name}' already existed and has been overwritten")
    else:
        click.echo(f"✓ Domain '{domain_name}' has been added to {app.config.hosts_file_path}")
    click.echo(f"  {result.entry_line}")
    click.echo()
    _print_report(app)


def _switch(app: MukoApp, identifier: str, dev_mode: bool) -> None:
    try:
        app.set_mode(identifier, dev_mode)
    except (MukoError, OSError) as e:
        _fail(e)

    click.echo(f"✓ Set '{identifier}' to {'DEV' if dev_mode else 'PROD'} mode")
    click.echo()
    _print_report(app)


@cli.command()
@click.argument("identifier")
@click.pass_obj
def dev(app, identifier):
    """Set a domain to DEV mode (uncomment to use custom IP)"""
    _switch(app, identifier, True)


@cli.command()
@click.argument("identifier")
@click.pass_obj
def prod(app, identifier):
    """Set a domain to PROD mode (comment out to use real IP)"""
    _switch(app, identifier, False)


def main() -> None:
    cli(prog_name="muko")


if __name__ == "__main__":
    main()

import logging

import click

from . import config
from .project import OreAPI, Project, api_version_predicate


@click.group()
@click.option('--url', default=config.ORE_API_URL, show_default=True, help="Base URL of the Ore API")
@click.option('--api-key', default=config.ORE_API_KEY, help="API key (default: $ORE_API_KEY)")
@click.option('-v', '--verbose', is_flag=True, default=False, help="Log what is going on")
@click.pass_context
def cli(ctx, url, api_key, verbose):
    """
    Query an Ore plugin repository
    """
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)
    ctx.obj = ctx.with_resource(OreAPI(url, api_key))


@cli.command()
@click.pass_obj
def authenticate(api):
    """
    Open a session and show when it expires
    """
    api.sessions.authenticate()
    click.echo(api.sessions.get_expiration().isoformat())


@cli.command()
@click.argument("plugin_id")
@click.option('-o', '--offset', type=click.IntRange(min=0), default=0, help="Versions to skip")
@click.option('-l', '--limit', type=click.IntRange(min=1), default=10, help="Versions to show")
@click.pass_obj
def versions(api, plugin_id, offset, limit):
    """
    List the versions of a project
    """
    for v in api.get_versions(plugin_id, offset, limit):
        click.echo(f"{v.name}\t{v.created_at.isoformat()}\t{v.api_version or '-'}")


@cli.command()
@click.argument("plugin_id")
@click.option('--api-version', default=None, help="Only versions built against this SpongeAPI version")
@click.option('--owner', default=None, help="Project owner, to show the version page")
@click.option('--name', default=None, help="Project name, to show the version page")
@click.pass_context
def latest(ctx, plugin_id, api_version, owner, name):
    """
    Show the most recent version of a project
    """
    api = ctx.obj
    project = Project(plugin_id, owner, name)
    predicate = None if api_version is None else api_version_predicate(api_version)
    version = api.latest_version(project, predicate)
    if version is None:
        click.echo("Nothing found", err=True)
        ctx.exit(1)

    click.echo(version.name)
    if version.page:
        click.echo(version.page)


if __name__ == '__main__':
    cli()

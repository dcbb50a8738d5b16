"""Command-line interface for jiraclient.

Issues raw REST calls against the site configured in ./.jiraclient/settings.toml
(or the JIRA_* environment variables) and prints the result envelope as JSON.
"""

import asyncio
import json
import sys

import click

from . import __version__
from .client import JiraClient
from .config import (
    LOGS_DIR,
    SETTINGS_FILE,
    create_default_settings,
    default_config_from_settings,
)
from .errors import ConfigError, DescriptorError
from .logging import configure_logging
from .request import METHODS, RequestDescriptor, RequestOptions


def parse_pairs(pairs: tuple[str, ...], option: str) -> dict[str, str | list[str]]:
    """Parse repeated ``name=value`` options.

    A name given more than once collects its values into a list, which the
    dispatcher sends as repeated query keys.
    """
    params: dict[str, str | list[str]] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"Expected name=value, got {pair!r}", param_hint=option)
        if name in params:
            existing = params[name]
            params[name] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            params[name] = value
    return params


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version information")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool) -> None:
    """jiraclient - call the Jira Cloud REST API.

    Examples:

        jiraclient init                                   Write a settings file

        jiraclient call GET /rest/api/3/myself            Show the current user

        jiraclient call GET /rest/api/3/project/{key} -p key=EX
    """
    configure_logging(verbose=verbose, log_dir=LOGS_DIR)

    if version:
        click.echo(f"jiraclient version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command("init")
def init() -> None:
    """Create a default settings file."""
    if create_default_settings():
        click.echo(f"Created {SETTINGS_FILE}")
        click.echo("Fill in [jira] base_url, email and api_token to get started.")
    else:
        click.echo(f"Settings already exist at {SETTINGS_FILE}")


@main.command("call")
@click.argument("method", type=click.Choice(METHODS, case_sensitive=False))
@click.argument("path")
@click.option("--path-param", "-p", multiple=True, metavar="NAME=VALUE", help="Path parameter")
@click.option("--query", "-q", multiple=True, metavar="NAME=VALUE", help="Query parameter")
@click.option("--header", "-H", multiple=True, metavar="NAME=VALUE", help="Extra header")
@click.option("--body", "-d", help="JSON request body, sent as given")
@click.option("--no-response", is_flag=True, help="Don't decode a response body")
@click.option("--experimental", is_flag=True, help="Opt in to experimental APIs")
def call(
    method: str,
    path: str,
    path_param: tuple[str, ...],
    query: tuple[str, ...],
    header: tuple[str, ...],
    body: str | None,
    no_response: bool,
    experimental: bool,
) -> None:
    """Send one request and print the result.

    Exits with status 1 when the request fails.
    """
    headers = parse_pairs(header, "--header")
    if any(isinstance(value, list) for value in headers.values()):
        raise click.BadParameter("Headers may only be given once", param_hint="--header")

    if body is not None:
        try:
            json.loads(body)
        except ValueError as e:
            raise click.BadParameter(f"Body is not valid JSON: {e}", param_hint="--body") from e

    try:
        descriptor = RequestDescriptor(
            path=path,
            method=method.upper(),
            path_params=parse_pairs(path_param, "--path-param"),
            query_params=parse_pairs(query, "--query"),
            body=body,
            is_response_available=not no_response,
            is_experimental=experimental,
        )
        options = RequestOptions(headers=headers)
    except DescriptorError as e:
        raise click.UsageError(str(e)) from e

    asyncio.run(cmd_call(descriptor, options))


async def cmd_call(descriptor: RequestDescriptor, options: RequestOptions) -> None:
    """Dispatch a descriptor with the configured client and print the envelope."""
    try:
        client = JiraClient(default_config_from_settings())
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        click.echo(f"Edit {SETTINGS_FILE} or set JIRA_BASE_URL, JIRA_EMAIL, JIRA_API_TOKEN.", err=True)
        sys.exit(1)

    async with client:
        try:
            result = await client.request(descriptor, options)
        except DescriptorError as e:
            click.echo(f"Invalid request: {e}", err=True)
            sys.exit(1)

    click.echo(json.dumps(result.as_dict(), indent=2, default=str))
    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()

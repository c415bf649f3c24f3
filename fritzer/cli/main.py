"""Main module for cli tool."""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any

import asyncclick as click
from rich.logging import RichHandler

from fritzer import BoxConfig, Credentials, Fritzbox

from .common import (
    CatchAllExceptions,
    echo,
    json_formatter_cb,
    pass_box,
)
from .switch import switch

_LOGGER = logging.getLogger(__name__)


async def _prompt_password() -> str:
    return await click.prompt("Your password", hide_input=True)


@click.group(
    invoke_without_command=True,
    cls=CatchAllExceptions(click.Group),
    result_callback=json_formatter_cb,
)
@click.option(
    "-u",
    "--url",
    envvar="FRITZER_URL",
    required=True,
    help="Url of the FRITZ!Box, e.g. http://fritz.box",
)
@click.option(
    "-s",
    "--sid-path",
    envvar="FRITZER_SID_PATH",
    default=None,
    required=False,
    type=click.Path(dir_okay=False),
    help="Path to the session file (default: ~/.fritzer.sid)",
)
@click.option(
    "--username",
    envvar="FRITZER_USERNAME",
    default=None,
    required=False,
    help="FRITZ!Box user (default: last logged in user)",
)
@click.option(
    "-p",
    "--password",
    envvar="FRITZER_PASSWORD",
    default=None,
    required=False,
    help="Password of the FRITZ!Box user, prompted for if required and not given.",
)
@click.option(
    "--timeout",
    envvar="FRITZER_TIMEOUT",
    default=BoxConfig.DEFAULT_TIMEOUT,
    required=False,
    show_default=True,
    type=int,
    help="Timeout for box communications.",
)
@click.option(
    "-d",
    "--debug",
    envvar="FRITZER_DEBUG",
    default=False,
    is_flag=True,
    help="Print debug output",
)
@click.option(
    "--json/--no-json",
    envvar="FRITZER_JSON",
    default=False,
    is_flag=True,
    help="Output raw results as JSON.",
)
@click.version_option(package_name="fritzer")
@click.pass_context
async def cli(ctx, url, sid_path, username, password, timeout, debug, json):
    """Use the FRITZ!Box AHA interface."""
    # no need to perform any checks if we are just displaying the help
    if "--help" in sys.argv:
        # Context object is required to avoid crashing on sub-groups
        ctx.obj = object()
        return

    logging_config: dict[str, Any] = {
        "level": logging.DEBUG if debug else logging.INFO,
        "format": "%(message)s",
        "handlers": [RichHandler(show_time=False)],
    }
    logging.basicConfig(**logging_config)

    config = BoxConfig(
        host=url,
        timeout=timeout,
        credentials=Credentials(username=username, password=password),
        sid_path=sid_path,
    )
    box = Fritzbox(config, password_callback=_prompt_password)

    @asynccontextmanager
    async def async_wrapped_box(box: Fritzbox):
        try:
            yield box
        finally:
            await box.close()

    ctx.obj = await ctx.with_async_resource(async_wrapped_box(box))
    await box.connect()
    _LOGGER.debug("The SID %s", box.session.sid)

    if ctx.invoked_subcommand is None:
        return await ctx.invoke(state)

    return box


@cli.command()
@pass_box
async def state(box: Fritzbox):
    """Show the session state."""
    info = box.session_info
    echo(f"[bold]== {box.config.url} ==[/bold]")
    echo(f"Connected: {box.is_connected()}")
    if info is not None and info.users:
        echo(f"Users: {', '.join(user.username for user in info.users)}")
    return box


@cli.command()
@pass_box
async def logout(box: Fritzbox):
    """Invalidate the session on the box."""
    await box.logout()
    echo("Logged out")
    return box.session_info


cli.add_command(switch)


if __name__ == "__main__":
    cli()

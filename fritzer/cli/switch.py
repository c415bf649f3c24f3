"""Module for cli switch control commands."""

from __future__ import annotations

import logging

import asyncclick as click

from fritzer import Device, Fritzbox

from .common import echo, pass_box

_LOGGER = logging.getLogger(__name__)


@click.command()
@click.option("-l", "--list", "list_", is_flag=True, help="lists switches")
@pass_box
async def switch(box: Fritzbox, list_: bool) -> list[Device] | None:
    """Commands related to switches."""
    if not list_:
        echo("Nothing to do, use --list to list switches")
        return None

    _LOGGER.debug("List switches...")
    switches = await box.get_switches()
    list_devices(switches)
    return switches


def list_devices(devices: list[Device]) -> None:
    """Print the switches as a table."""
    echo(f"| {'Nr':<2} | {'AIN':<12} | {'Name':<10} |")
    echo("+----+--------------+------------+")
    for idx, device in enumerate(devices):
        echo(f"| {idx:<2} | {device.ain:<12} | {device.name:<10} |")

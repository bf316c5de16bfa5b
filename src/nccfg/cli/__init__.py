# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Command-line interface for inspecting the stored client configuration."""

from __future__ import annotations

from typing import Any

import rich_click as click
import yaml
from rich.console import Console

from nccfg.__about__ import __version__
from nccfg.cli.render import TableRenderer
from nccfg.config.auth import AuthMethod, AuthSettings
from nccfg.config.history import NullHistory
from nccfg.config.location import default_config_dir
from nccfg.errors import HomeDirectoryError
from nccfg.logging import init_cli_logging
from nccfg.session import ClientConfigContext, load_config


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--product", default="netconf", show_default=True, help="Product name")
@click.version_option(version=__version__, prog_name="nccfg")
@click.pass_context
def nccfg(ctx: click.Context, *, verbose: bool, product: str) -> None:
    """nccfg - NETCONF client configuration tool."""
    init_cli_logging(verbose=verbose)
    ctx.obj = {"product": product}


@nccfg.command()
@click.pass_context
def path(ctx: click.Context) -> None:
    """Print the configuration directory."""
    try:
        directory = default_config_dir(ctx.obj["product"])
    except HomeDirectoryError as e:
        raise click.ClickException(str(e)) from e
    click.echo(str(directory))


def _summary(context: ClientConfigContext) -> dict[str, Any]:
    auth = context.auth
    preferences: dict[str, int] = {}
    keypair = None
    if isinstance(auth, AuthSettings):
        preferences = {m.value: auth.preferences[m] for m in AuthMethod if m in auth.preferences}
        keypair = auth.keypair
    return {
        "capabilities": list(context.capabilities),
        "authentication": {
            "preferences": preferences,
            "private_key": keypair.private_path if keypair else None,
            "public_key": keypair.public_path if keypair else None,
        },
    }


@nccfg.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "yaml"]),
    default="table",
    show_default=True,
    help="Output format",
)
@click.pass_context
def show(ctx: click.Context, output_format: str) -> None:
    """Load the stored configuration and print it."""
    context = ClientConfigContext(history=NullHistory(), product=ctx.obj["product"])
    report = load_config(context)
    summary = _summary(context)
    summary["directory"] = str(report.directory) if report.directory else None

    if output_format == "yaml":
        click.echo(yaml.safe_dump(summary, sort_keys=False), nl=False)
        return

    renderer = TableRenderer(Console())
    auth = summary["authentication"]
    renderer.render_key_values(
        "Authentication",
        {
            "directory": summary["directory"],
            **{f"pref {name}": prio for name, prio in auth["preferences"].items()},
            "private key": auth["private_key"],
            "public key": auth["public_key"],
        },
    )
    renderer.render_list("Capabilities", summary["capabilities"])

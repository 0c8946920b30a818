from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from family_tree.config import load_config, set_config
from family_tree.interactive import FamilyTreeSession, Menu, RichConsolePort
from family_tree.layout.grouping import UnattachedPolicy
from family_tree.logging import configure_logging

console = Console(markup=False, highlight=False, emoji=False)


def run_command(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        readable=True,
        help="YAML config file (defaults to config/family_tree.yml)",
    ),
    unattached_policy: Optional[UnattachedPolicy] = typer.Option(
        None,
        "--unattached-policy",
        help="Layout placement of members added without parents",
    ),
    ascii_connector: bool = typer.Option(
        False,
        "--ascii",
        help="Draw connectors with '|' instead of a box-drawing glyph",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
):
    """
    Start the interactive family tree menu.
    """
    cfg = load_config(config)
    if debug:
        cfg.debug = True
    if unattached_policy is not None:
        cfg.unattached_policy = unattached_policy.value
    if ascii_connector:
        cfg.layout["connector"] = "|"
    set_config(cfg)
    configure_logging(cfg)

    session = FamilyTreeSession(RichConsolePort(console), config=cfg)
    Menu(session).run()

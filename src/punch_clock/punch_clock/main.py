from __future__ import annotations

import importlib
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import click
from dotenv import load_dotenv

from config import get_settings_module

from . import __version__
from .container import build_container
from .core.exceptions import JournalIOError
from .journal.bootstrap import ensure_log_file
from .punch.controller import register as register_punch
from .report.controller import register as register_report

logger = logging.getLogger(__name__)


def configure_logging(settings) -> None:
    debug = bool(getattr(settings, "DEBUG", False))
    level = logging.DEBUG if debug else getattr(settings, "LOG_LEVEL", "WARNING")
    logging.basicConfig(level=level, format="[punch-clock] %(levelname)s %(name)s: %(message)s")


def create_cli(*, clock: Optional[Callable[[], datetime]] = None) -> click.Group:
    @click.group(help="A simple time tracker app")
    @click.version_option(__version__, prog_name="punch")
    @click.option(
        "--log-file",
        envvar="PUNCH_LOG_PATH",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Punch log to use (default: ~/.punch/punch.log)",
    )
    @click.pass_context
    def cli(ctx: click.Context, log_file: Optional[Path]) -> None:
        load_dotenv(override=False)

        settings_module = get_settings_module()
        settings = importlib.import_module(settings_module)
        configure_logging(settings)

        log_path = log_file or Path(getattr(settings, "LOG_PATH"))
        logger.debug("settings=%s log=%s", settings_module, log_path)

        try:
            log_path = ensure_log_file(log_path)
        except JournalIOError as e:
            raise click.ClickException(f"Couldn't create punch log: {e}.") from e

        ctx.obj = build_container(log_path=log_path, clock=clock)

    register_punch(cli)
    register_report(cli)

    return cli


def main() -> None:
    create_cli()()


if __name__ == "__main__":
    main()

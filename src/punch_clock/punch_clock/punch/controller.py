from __future__ import annotations

import click

from ..common.datetime_utils import format_timestamp
from ..container import Container
from ..core.enums import Action
from ..core.exceptions import (
    InsufficientDataError,
    MalformedRecordError,
    PunchError,
    StateViolationError,
)


def register(cli: click.Group) -> None:
    def do_punch(container: Container, action: Action, label: str) -> None:
        try:
            record = container.punch_service.punch(action)
        except StateViolationError as e:
            # Rejected punches are a no-op, not a failure.
            click.echo(str(e))
            return
        except (InsufficientDataError, MalformedRecordError) as e:
            # The last record must be readable before anything is appended.
            raise click.ClickException(f"Couldn't read entry: {e}.") from e
        except PunchError as e:
            raise click.ClickException(f"Couldn't update punch log: {e}.") from e

        click.echo(f"Punched {label} at {format_timestamp(record.timestamp)}")

    @cli.command("in", help="Punch in")
    @click.pass_obj
    def punch_in(container: Container) -> None:
        do_punch(container, Action.PUNCH_IN, "in")

    @cli.command("out", help="Punch out")
    @click.pass_obj
    def punch_out(container: Container) -> None:
        do_punch(container, Action.PUNCH_OUT, "out")

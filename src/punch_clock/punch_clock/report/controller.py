from __future__ import annotations

import click

from ..common.datetime_utils import format_duration, format_timestamp
from ..container import Container
from ..core.exceptions import PunchError
from .model import PeriodSummary, SessionStatus


def _print_status(status: SessionStatus) -> None:
    if status.is_open:
        click.echo(
            f"Punched in since {format_timestamp(status.started_at)} ({format_duration(status.duration)})"
        )
        return

    click.echo(
        "Previously punched in between "
        f"{format_timestamp(status.started_at)} and {format_timestamp(status.ended_at)} "
        f"({format_duration(status.duration)})"
    )


def _print_summary(summary: PeriodSummary) -> None:
    for day in summary.days:
        click.echo(f"{day.date.isoformat()}: {format_duration(day.duration)}")
    click.echo(f"\nTotal: {format_duration(summary.total)}")


def register(cli: click.Group) -> None:
    @cli.command("card", help="Display state")
    @click.option("--week", "-w", is_flag=True, help="Display summary for the current week")
    @click.option("--mtd", "-m", is_flag=True, help="Display summary for the month to date")
    @click.pass_obj
    def card(container: Container, week: bool, mtd: bool) -> None:
        reports = container.report_service
        try:
            if week:
                _print_summary(reports.week_summary())
            elif mtd:
                _print_summary(reports.month_to_date_summary())
            else:
                _print_status(reports.current_status())
        except PunchError as e:
            raise click.ClickException(f"Couldn't read entry: {e}.") from e

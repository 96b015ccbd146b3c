# ruff: noqa: T201

import sys
from pathlib import Path
from typing import Annotated

import click
import typer
from loguru import logger
from loguru_config import LoguruConfig
from typer.core import TyperCommand

import diff_dir.log_setup as _log_setup
from diff_dir import PROG_NAME, VERSION
from diff_dir.common_typer_options import DirsArg, LogLevelArg
from diff_dir.errors import DiffDirError, UsageError
from diff_dir.report import ReportWriter
from diff_dir.tree_differ import TreeDiffer
from diff_dir.validate import validate_roots

APP_LOGGING_NAME = "ddir"

_RESOURCES = Path(__file__).parent / "resources"

DESCRIPTION = (
    "Find difference of two directories recursively based on file size and modification time."
)

app = typer.Typer(add_completion=False)


def get_usage_banner() -> str:
    return f"\n{PROG_NAME} {VERSION}\n\nUsage:\n\t{PROG_NAME} <dir1> <dir2>\n\n{DESCRIPTION}\n"


class BannerCommand(TyperCommand):
    """Reports every command-line usage error with the usage banner and exit status 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            print(f"{e.format_message()}\n{get_usage_banner()}", file=sys.stderr)
            ctx.exit(1)


def _show_version(value: bool) -> None:
    if value:
        print(f"{PROG_NAME} {VERSION}")
        raise typer.Exit


# Unknown options are kept as positional arguments so directories may start with "-".
@app.command(
    cls=BannerCommand,
    help=DESCRIPTION,
    context_settings={"ignore_unknown_options": True},
)
def main(
    dirs: DirsArg = None,
    log_level_str: LogLevelArg = "WARNING",
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option(
            "--version", help="Show the version and exit.", callback=_show_version, is_eager=True
        ),
    ] = False,
) -> None:
    _log_setup.log_level = log_level_str
    _log_setup.APP_LOGGING_NAME = APP_LOGGING_NAME
    LoguruConfig.load(_RESOURCES / "log-config.yaml")

    try:
        if not dirs or len(dirs) != 2:  # noqa: PLR2004
            raise UsageError(get_usage_banner())

        dir1, dir2 = validate_roots(dirs[0], dirs[1])
        TreeDiffer(ReportWriter()).run(dir1, dir2)
    except UsageError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    except DiffDirError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    app()

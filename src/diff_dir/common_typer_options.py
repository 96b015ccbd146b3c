from typing import Annotated

import typer

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def _check_log_level(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        msg = f'Unknown log level "{value}". Expected one of: {", ".join(LOG_LEVELS)}.'
        raise typer.BadParameter(msg)
    return level


LogLevelArg = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Level of the diagnostic log written to stderr.",
        callback=_check_log_level,
    ),
]

DirsArg = Annotated[
    list[str] | None,
    typer.Argument(metavar="DIR1 DIR2", help="The two directories to compare.", show_default=False),
]

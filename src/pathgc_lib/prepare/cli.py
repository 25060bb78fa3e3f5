# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click

from pathgc_lib.core.click_format import GNUHelpColorsCommand
from pathgc_lib.core.config import CFG
from pathgc_lib.core.error import PathGCError
from pathgc_lib.core.logger import get_logger
from pathgc_lib.step import PathGCStep

logger = get_logger(__name__)


@click.command(
    short_help="Create a cleanup step.",
    help=f"""Create a cleanup step deleting the specified paths and store it in a step file.

{click.style("STEP_FILE", fg="green")}   Path to the step file to create.
{click.style("PATH", fg="green")}        Paths to delete. Multiple paths can be specified.

Paths ending with `*` are deleted without the trailing `*`; no wildcard expansion is performed.
Paths must not contain commas.

Run the created step using `{CFG.binary_name} run STEP_FILE`.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument(
    "step_file",
    type=click.Path(dir_okay=False, path_type=Path),
    metavar=click.style("STEP_FILE", fg="green"),
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=str,
    metavar=click.style("PATH", fg="green"),
)
@click.option(
    "--job-id",
    type=str,
    required=True,
    help="Identifier of the job the paths belong to. Used to locate the working directory of the job.",
)
@click.option(
    "--name",
    type=str,
    default=PathGCStep.DEFAULT_NAME,
    show_default=True,
    help="Human-readable name of the step.",
)
def prepare(
    step_file: Path, paths: tuple[str, ...], job_id: str, name: str
) -> NoReturn:
    """
    Create a cleanup step deleting the specified paths and store it in a step file.
    """
    try:
        step = PathGCStep(name=name)
        step.setDeletePaths(list(paths))
        step.setJobId(job_id)
        step.toFile(step_file)

        logger.info(
            f"Created step '{step.getId()}' deleting {len(paths)} path{'s' if len(paths) > 1 else ''} in '{step_file}'."
        )
        sys.exit(0)
    except PathGCError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)

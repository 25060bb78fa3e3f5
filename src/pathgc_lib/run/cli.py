# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from pathgc_lib.core.click_format import GNUHelpColorsCommand
from pathgc_lib.core.config import CFG, Config
from pathgc_lib.core.error import PathGCError
from pathgc_lib.core.error_handlers import handle_general_error
from pathgc_lib.core.logger import get_logger
from pathgc_lib.core.repeater import Repeater
from pathgc_lib.step import PathGCStep, StepContext, StepResult

logger = get_logger(__name__)
console = Console()


@click.command(
    short_help="Run cleanup steps.",
    help=f"""Run the cleanup steps stored in the specified step files.

{click.style("STEP_FILE", fg="green")}   Path to a step file created by `{CFG.binary_name} prepare`. Multiple files can be specified.

Each step deletes its paths on the configured filesystem and, if the parent directory of a path is left empty,
also deletes the working directory of the job. Paths ending with `*` are deleted without the trailing `*`.

Deletions cannot be undone. A step that fails is not rolled back: paths deleted before the failure stay deleted.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument(
    "step_files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    metavar=click.style("STEP_FILE", fg="green"),
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to the pathgc config file to use instead of the default one.",
)
def run(step_files: tuple[Path, ...], config_file: Path | None = None) -> NoReturn:
    """
    Run the cleanup steps stored in the specified step files.
    """
    try:
        config = _load_config(config_file)
        repeater = Repeater(list(step_files), run_step_file, config)
        repeater.onException(PathGCError, handle_general_error)
        repeater.run()

        if any(not result.succeeded for result in repeater.results.values()):
            sys.exit(config.exit_codes.step_errored)
        if repeater.encountered_errors:
            sys.exit(config.exit_codes.default)
        sys.exit(0)
    # PathGCErrors from individual steps should be caught by Repeater
    except PathGCError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)


def run_step_file(step_file: Path, config: Config) -> StepResult:
    """
    Load a cleanup step from the step file and run it.

    Args:
        step_file (Path): Path to the step file.
        config (Config): Configuration to run the step with.

    Returns:
        StepResult: Result of the step.

    Raises:
        ParameterError: If the step file cannot be loaded.
    """
    step = PathGCStep.fromFile(step_file)
    logger.info(f"Running step '{step.getName()}' ({step.getId()}).")

    result = step.run(StepContext(config=config))
    if result.output:
        console.print(
            Panel(
                Text(result.output.rstrip()),
                title=str(step_file),
                border_style="bright_green" if result.succeeded else "bright_red",
                expand=False,
            )
        )

    if result.succeeded:
        logger.info(f"Step '{step.getId()}' {str(result.state)}.")
    else:
        logger.error(f"Step '{step.getId()}' {str(result.state)}.")

    return result


def _load_config(config_file: Path | None) -> Config:
    """Load the config file if specified, otherwise use the global configuration."""
    if config_file is None:
        return CFG

    try:
        return Config.load(config_file)
    except ValueError as e:
        raise PathGCError(str(e)) from e

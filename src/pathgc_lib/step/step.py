# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
The path garbage-collection step executed by the job framework.

`PathGCStep` is configured before its first run using `setDeletePaths` and
`setJobId`, which write into its flat parameter store. The store is persisted
together with the identity of the step in a YAML step file, so that the
framework can restore the step and run it later.
"""

import uuid
from pathlib import Path
from typing import Self

import yaml

from pathgc_lib.core.common import load_yaml_dumper, load_yaml_loader
from pathgc_lib.core.error import FileSystemError, ParameterError
from pathgc_lib.core.logger import get_logger
from pathgc_lib.fs import FileSystemMeta

from .cleaner import PathCleaner
from .context import StepContext
from .params import JOB_ID, TO_DELETE_PATHS, Params
from .request import DeletionRequest
from .result import CleanOutcome, StepResult, StepState, Trail

logger = get_logger(__name__)

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()
SafeDumper: type[yaml.SafeDumper] = load_yaml_dumper()


class PathGCStep:
    """
    Cleanup step deleting paths that are no longer needed by a job.
    """

    DEFAULT_NAME = "Garbage Collection on Filesystem"

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        step_id: str | None = None,
        params: Params | None = None,
    ):
        """
        Initialize the step.

        Args:
            name (str): Human-readable name of the step.
            step_id (str | None): Identifier of the step. A new one is generated if not provided.
            params (Params | None): Parameters of the step. Empty if not provided.
        """
        self._name = name
        self._step_id = step_id or uuid.uuid4().hex
        self._params = params if params is not None else Params()

    def getId(self) -> str:
        """Return the identifier of the step."""
        return self._step_id

    def getName(self) -> str:
        """Return the name of the step."""
        return self._name

    def setDeletePaths(self, paths: list[str]) -> None:
        """
        Set the paths to delete. Paths ending with `*` are deleted without the marker.

        Raises:
            ParameterError: If any of the paths contains a comma.
        """
        self._params.setList(TO_DELETE_PATHS, paths)

    def setJobId(self, job_id: str) -> None:
        """Set the identifier of the job whose working directory may be pruned."""
        self._params.set(JOB_ID, job_id)

    def getDeletePaths(self) -> list[str]:
        """Return the paths to delete."""
        return self._params.getList(TO_DELETE_PATHS)

    def getJobId(self) -> str | None:
        """Return the identifier of the job."""
        return self._params.get(JOB_ID)

    def run(self, context: StepContext) -> StepResult:
        """
        Delete the configured paths.

        This operation is destructive and is not transactional: deletions
        performed before a failure are not rolled back.

        Args:
            context (StepContext): Execution context of the step.

        Returns:
            StepResult: `SUCCEEDED` with the trail of the run, or `ERRORED` with the trail
            of the run followed by the message of the filesystem error that stopped it.
        """
        request = DeletionRequest.fromParams(self._params)
        logger.debug(
            f"Running step '{self._step_id}' for job '{request.job_id}' with {len(request.paths)} path(s)."
        )

        trail = Trail()
        try:
            fs = context.filesystem or FileSystemMeta.fromConfig(context.config)
            cleaner = PathCleaner(fs, context.config.jobWorkingDir)
            outcome = cleaner.clean(request, trail)
        except FileSystemError as e:
            outcome = CleanOutcome(trail, e)

        if outcome.error is not None:
            logger.error(
                f"Step '{self._step_id}' finished with exception: {outcome.error}"
            )
            return StepResult(
                StepState.ERRORED, outcome.trail.append(str(outcome.error)).text
            )

        return StepResult(StepState.SUCCEEDED, outcome.trail.text)

    @classmethod
    def fromFile(cls, file: Path) -> Self:
        """
        Load a step from a YAML step file.

        Args:
            file (Path): Path to the step file.

        Returns:
            PathGCStep: The restored step.

        Raises:
            ParameterError: If the file does not exist, cannot be parsed,
                or does not describe a step.
        """
        logger.debug(f"Loading step from '{file}'.")
        if not file.exists():
            raise ParameterError(f"Step file '{file}' does not exist.")

        try:
            with file.open("r") as input:
                data = yaml.load(input, Loader=SafeLoader)
        except yaml.YAMLError as e:
            raise ParameterError(f"Could not parse the step file '{file}': {e}.") from e

        if not isinstance(data, dict) or "step_id" not in data:
            raise ParameterError(f"Invalid step file '{file}': missing 'step_id'.")

        return cls(
            name=str(data.get("name", cls.DEFAULT_NAME)),
            step_id=str(data["step_id"]),
            params=Params.fromDict(data.get("params")),
        )

    def toFile(self, file: Path) -> None:
        """
        Export the step into a YAML step file.

        Args:
            file (Path): Path to write the step file to.

        Raises:
            ParameterError: If the file cannot be created or written to.
        """
        data = {
            "step_id": self._step_id,
            "name": self._name,
            "params": self._params.toDict(),
        }

        logger.debug(f"Exporting step into '{file}'.")
        try:
            content = yaml.dump(
                data, default_flow_style=False, sort_keys=False, Dumper=SafeDumper
            )
            with file.open("w") as output:
                output.write("# pathgc step file\n" + content)
        except Exception as e:
            raise ParameterError(f"Cannot create or write to file '{file}': {e}") from e

    def __repr__(self) -> str:
        return f"PathGCStep(name={self._name!r}, step_id={self._step_id!r}, params={self._params!r})"

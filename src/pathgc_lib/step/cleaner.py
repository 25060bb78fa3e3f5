# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from collections.abc import Callable, Iterator

from pathgc_lib.core.error import FileSystemError
from pathgc_lib.core.logger import get_logger
from pathgc_lib.fs import FileSystemInterface, parent_of

from .request import DeletionRequest
from .result import CleanOutcome, Trail

logger = get_logger(__name__)

# Trailing marker meaning "this path or its content". Never expanded.
WILDCARD = "*"


class PathCleaner:
    """
    Deletes the paths of a deletion request and prunes the emptied job working directory.
    """

    def __init__(
        self,
        fs: FileSystemInterface,
        job_dir_resolver: Callable[[str], str],
    ):
        """
        Initialize a PathCleaner.

        Args:
            fs (FileSystemInterface): Filesystem to delete the paths on.
            job_dir_resolver (Callable[[str], str]): Function returning
                the working directory of a job given its identifier.
        """
        self._fs = fs
        self._job_dir_resolver = job_dir_resolver

    def clean(
        self, request: DeletionRequest, trail: Trail | None = None
    ) -> CleanOutcome:
        """
        Delete all paths of the request in order.

        Paths that do not exist are reported and skipped. After each path, if its
        parent directory is left empty, the working directory of the job is deleted.

        The pass stops at the first filesystem error. Deletions already performed
        are not rolled back.

        Args:
            request (DeletionRequest): Paths to delete and the job they belong to.
            trail (Trail | None): Trail to extend. A new trail is started if not provided.

        Returns:
            CleanOutcome: The extended trail and the error that stopped the pass, if any.
        """
        if trail is None:
            trail = Trail()

        if not request.paths:
            logger.debug("No paths to drop.")
            return CleanOutcome(trail)

        try:
            trail = PathCleaner._record(
                trail, f'Drop path on filesystem: "{self._fs.uri()}"'
            )
            for path in request.paths:
                for line in self._dropPath(path, request.job_id):
                    trail = PathCleaner._record(trail, line)
        except FileSystemError as e:
            return CleanOutcome(trail, e)

        return CleanOutcome(trail)

    def _dropPath(self, path: str, job_id: str | None) -> Iterator[str]:
        """
        Drop a single path, yielding a trail line for every action taken.
        """
        if path.endswith(WILDCARD):
            path = path[: -len(WILDCARD)]

        if self._fs.exists(path):
            self._fs.delete(path, recursive=True)
            yield f"Path {path} is dropped."
        else:
            yield f"Path {path} not exists."

        # the job working directory is left empty once all of its
        # subdirectories are dropped by this or other cleanup steps
        parent = parent_of(path)
        if parent is None or not self._isEmptyDir(parent):
            return

        if not job_id:
            logger.warning(
                f"Directory '{parent}' is empty but the job is unknown. Not dropping the job directory."
            )
            return

        job_dir = self._job_dir_resolver(job_id)
        if self._fs.exists(job_dir):
            self._fs.delete(job_dir, recursive=True)
            yield f"Path {job_dir} is empty and dropped."

    def _isEmptyDir(self, directory: str) -> bool:
        """Check whether the directory exists and has no entries."""
        return self._fs.exists(directory) and not self._fs.listDir(directory)

    @staticmethod
    def _record(trail: Trail, line: str) -> Trail:
        logger.debug(line)
        return trail.append(line)

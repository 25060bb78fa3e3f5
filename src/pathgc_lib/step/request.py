# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass
from typing import Self

from .params import JOB_ID, TO_DELETE_PATHS, Params


@dataclass(frozen=True)
class DeletionRequest:
    """
    Paths to delete by a cleanup step and the job they belong to.
    """

    # Paths to delete, in the order they should be processed.
    paths: tuple[str, ...] = ()

    # Identifier of the job used to derive its working directory.
    job_id: str | None = None

    @classmethod
    def fromParams(cls, params: Params) -> Self:
        """
        Decode the deletion request from step parameters.

        Args:
            params (Params): Parameters of the step.

        Returns:
            DeletionRequest: The decoded request.
        """
        return cls(
            paths=tuple(params.getList(TO_DELETE_PATHS)),
            job_id=params.get(JOB_ID),
        )

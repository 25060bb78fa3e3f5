# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass
from enum import Enum
from typing import Self

from pathgc_lib.core.error import FileSystemError


class StepState(Enum):
    """
    Terminal state of a cleanup step.
    """

    SUCCEEDED = 1
    ERRORED = 2

    def __str__(self) -> str:
        """
        Return the lowercase string representation of the enum variant.

        Returns:
            str: The name of the state in lowercase.
        """
        return self.name.lower()


@dataclass(frozen=True)
class Trail:
    """
    Ordered, append-only log of actions taken during a cleanup run.

    Appending returns a new trail; existing trails are never modified.
    """

    lines: tuple[str, ...] = ()

    def append(self, line: str) -> Self:
        """Return a new trail extended by `line`."""
        return type(self)(self.lines + (line,))

    @property
    def text(self) -> str:
        """The trail rendered as text, one line per action."""
        return "".join(f"{line}\n" for line in self.lines)


@dataclass(frozen=True)
class CleanOutcome:
    """
    Trail of a deletion pass and the error that terminated it, if any.
    """

    trail: Trail
    error: FileSystemError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class StepResult:
    """
    Terminal state of a cleanup step paired with its final trail text.
    """

    state: StepState
    output: str

    @property
    def succeeded(self) -> bool:
        """Whether the step finished successfully."""
        return self.state == StepState.SUCCEEDED

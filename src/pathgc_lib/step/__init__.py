# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
The path garbage-collection step.

- `PathGCStep`: the entry point invoked by the job framework. Decodes its
  parameters into a `DeletionRequest`, runs the `PathCleaner`, and reports
  a `StepResult`.

- `PathCleaner`: deletes the requested paths (stripping trailing `*` markers)
  and prunes the working directory of the job once it is left empty.

- `Params`, `encode_paths`, `decode_paths`: the flat parameter store of the
  step and the codec of its list-valued parameters.
"""

from .cleaner import PathCleaner
from .context import StepContext
from .params import Params, decode_paths, encode_paths
from .request import DeletionRequest
from .result import CleanOutcome, StepResult, StepState, Trail
from .step import PathGCStep

__all__ = [
    "CleanOutcome",
    "DeletionRequest",
    "Params",
    "PathCleaner",
    "PathGCStep",
    "StepContext",
    "StepResult",
    "StepState",
    "Trail",
    "decode_paths",
    "encode_paths",
]

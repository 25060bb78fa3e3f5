# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of pathgc.

pathgc is a cleanup step of a batch-job pipeline: once a data-processing job
finishes, it deletes the directories the job used as scratch or output space
and prunes the working directory of the job once it is left empty.

The package defines the step executed by the job framework, the deletion
algorithm, the codec of the step parameters, the filesystem backends, and the
command-line interface wrapping them.
"""

from .pathgc import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "core",
    "fs",
    "prepare",
    "run",
    "step",
]

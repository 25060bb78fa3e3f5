# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field

from pathgc_lib.core.config import CFG, Config
from pathgc_lib.fs import FileSystemInterface


@dataclass(frozen=True)
class StepContext:
    """
    Execution context passed to a cleanup step by the job framework.
    """

    # Configuration the step derives its filesystem and job paths from.
    config: Config = field(default_factory=lambda: CFG)

    # Filesystem handle owned by the framework. Derived from `config` if not provided.
    filesystem: FileSystemInterface | None = None

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Command running persisted cleanup steps.
"""

from .cli import run, run_step_file

__all__ = [
    "run",
    "run_step_file",
]

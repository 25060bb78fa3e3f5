# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Command creating cleanup step files.
"""

from .cli import prepare

__all__ = [
    "prepare",
]

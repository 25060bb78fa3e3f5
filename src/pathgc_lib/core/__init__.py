# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for pathgc.

This module collects the foundational classes and helpers used across the
pathgc codebase: configuration, error types and handlers, structured logging,
and command-line formatting.
"""

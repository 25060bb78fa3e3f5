# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for pathgc.

This module defines dataclasses representing all configurable aspects of pathgc,
including environment variables, the filesystem the cleanup step operates on,
the convention used to derive job working directories, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by pathgc."""

    # Enables pathgc debug mode.
    debug_mode: str = "PATHGC_DEBUG"
    # Explicit path to the pathgc config file.
    config_file: str = "PATHGC_CONFIG"


@dataclass
class FileSystemSettings:
    """Settings of the filesystem the cleanup step deletes paths on."""

    # URI of the filesystem. Scheme-less URIs refer to the local filesystem.
    uri: str = "file:///"
    # Name of (or path to) the Hadoop command-line client.
    hdfs_binary: str = "hdfs"
    # Timeout (in seconds) for a single call of the Hadoop client.
    hdfs_timeout: int = 300


@dataclass
class JobPathSettings:
    """Convention used to compute the working directory of a job."""

    # Root of all job working directories.
    working_dir: str = "/tmp/pathgc"
    # Prefix prepended to the job identifier to form the name of its working directory.
    job_dir_prefix: str = ""


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by pathgc.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of pathgc commands.
    default: int = 91
    # Returned when a cleanup step finished in the errored state.
    step_errored: int = 92
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for pathgc."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    filesystem: FileSystemSettings = field(default_factory=FileSystemSettings)
    job_paths: JobPathSettings = field(default_factory=JobPathSettings)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the pathgc binary.
    binary_name: str = "pathgc"

    def jobWorkingDir(self, job_id: str) -> str:
        """
        Get the working directory of the job with the given identifier.

        Args:
            job_id (str): Identifier of the job.

        Returns:
            str: Path to the working directory of the job.
        """
        root = self.job_paths.working_dir.rstrip("/") + "/"
        return f"{root}{self.job_paths.job_dir_prefix}{job_id}"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read pathgc config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config_file))
            else None,
            # 2. Current working directory (for development/override)
            Path.cwd() / "pathgc_config.toml",
            # 3. XDG config home (standard user config location)
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "pathgc"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for pathgc.
CFG = Config.load()

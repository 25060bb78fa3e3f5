# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Flat parameter store of a cleanup step and the codec for list-valued parameters.

The surrounding job framework persists step parameters as string key-value pairs.
List-valued parameters are stored as a single comma-separated string; the codec
functions `encode_paths` and `decode_paths` are the only place aware of this format.
"""

from collections.abc import Iterable
from typing import Self

from pathgc_lib.core.error import ParameterError

# Separator of items in list-valued parameters.
SEPARATOR = ","

# Key of the parameter holding the paths to delete.
TO_DELETE_PATHS = "toDeletePaths"
# Key of the parameter holding the identifier of the job.
JOB_ID = "jobId"


def encode_paths(paths: Iterable[str]) -> str:
    """
    Encode an ordered collection of paths into a single parameter value.

    Args:
        paths (Iterable[str]): Paths to encode.

    Returns:
        str: The paths joined using `SEPARATOR`.

    Raises:
        ParameterError: If any of the paths contains `SEPARATOR`.
    """
    paths = list(paths)
    for path in paths:
        if SEPARATOR in path:
            raise ParameterError(
                f"Path '{path}' contains '{SEPARATOR}' which is not supported."
            )

    return SEPARATOR.join(paths)


def decode_paths(value: str | None) -> list[str]:
    """
    Decode a parameter value into an ordered list of paths.

    Empty items (e.g., produced by adjacent separators) are dropped.

    Args:
        value (str | None): The stored parameter value.

    Returns:
        list[str]: The decoded paths. Empty if the value is None.
    """
    if value is None:
        return []

    return [path for path in value.split(SEPARATOR) if path]


class Params:
    """
    Flat string-keyed store of step parameters.
    """

    def __init__(self, data: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(data) if data else {}

    def set(self, key: str, value: str | None) -> None:
        """
        Set the value of a parameter. Setting None removes the parameter.
        """
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = value

    def get(self, key: str) -> str | None:
        """
        Get the value of a parameter or None if the parameter is not set.
        """
        return self._data.get(key)

    def setList(self, key: str, values: Iterable[str]) -> None:
        """
        Set a list-valued parameter.

        Raises:
            ParameterError: If any of the values cannot be encoded.
        """
        self.set(key, encode_paths(values))

    def getList(self, key: str) -> list[str]:
        """
        Get a list-valued parameter. Returns an empty list if the parameter is not set.
        """
        return decode_paths(self.get(key))

    def toDict(self) -> dict[str, str]:
        """Return a copy of all parameters as a dictionary."""
        return dict(self._data)

    @classmethod
    def fromDict(cls, data: object) -> Self:
        """
        Construct the parameter store from a dictionary.

        Args:
            data (object): Dictionary mapping parameter names to values.

        Returns:
            Params: The parameter store.

        Raises:
            ParameterError: If the data is not a flat mapping of strings to strings.
        """
        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise ParameterError(
                f"Step parameters must be a mapping, got '{type(data).__name__}'."
            )

        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ParameterError(
                    f"Invalid step parameter '{key}': names and values must be strings."
                )

        return cls(data)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Params) and self._data == other._data

    def __repr__(self) -> str:
        return f"Params({self._data!r})"

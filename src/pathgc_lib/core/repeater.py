# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Callable
from typing import Any


class Repeater:
    """
    Execute a given function for each item of a collection,
    with optional per-exception handling and tracking of encountered errors.

    Attributes:
        items (list[Any]): List of items to process.
        encountered_errors (dict[int, BaseException]): A dictionary mapping
            item indices to exceptions encountered during execution.
        current_iteration (int): The index of the item currently being processed.
        results (dict[int, Any]): A dictionary mapping item indices to the values
            returned by the function.

    Args:
        items (list[Any]): A list of items to iterate over.
        func (Callable): Function to execute for each item. The item will be passed
            as the first argument, followed by any `*args` and `**kwargs`.
        *args (Any): Positional arguments forwarded to `func`.
        **kwargs (Any): Keyword arguments forwarded to `func`.
    """

    def __init__(
        self,
        items: list[Any],
        func: Callable,
        *args: Any,
        **kwargs: Any,
    ):
        self.encountered_errors: dict[int, BaseException] = {}
        self.results: dict[int, Any] = {}
        self.items = items
        self.current_iteration = 0

        self._handlers: dict[type[BaseException], Callable[[BaseException], Any]] = {}
        self._func = func
        self._args = args
        self._kwargs = kwargs

    def onException(self, exc_type: type[BaseException], handler: Callable) -> None:
        """
        Register a handler function for a specific exception type.

        The handler is also used for subclasses of `exc_type`, unless a more
        specific handler is registered for them.

        Args:
            exc_type (type[BaseException]): The exception type to handle.
            handler (Callable): Function to call when `exc_type` is raised.
                The handler must accept two arguments:
                - BaseException: The caught exception instance.
                - Repeater: Reference to this `Repeater` instance.
        """
        self._handlers[exc_type] = handler

    def run(self) -> None:
        """
        Execute the target function for all items, invoking handlers for exceptions.

        Unhandled exceptions propagate normally and interrupt the iteration.
        Handled exceptions are recorded in `encountered_errors`.
        """
        for i, item in enumerate(self.items):
            self.current_iteration = i
            try:
                self.results[i] = self._func(item, *self._args, **self._kwargs)
            except tuple(self._handlers.keys()) as e:
                self.encountered_errors[i] = e
                self._getHandler(e)(e, self)

    def _getHandler(self, exception: BaseException) -> Callable:
        """Get the handler registered for the most specific base of the exception."""
        for exc_type in type(exception).__mro__:
            if exc_type in self._handlers:
                return self._handlers[exc_type]

        # should never get here
        raise RuntimeError(
            f"No handler registered for '{type(exception).__name__}'. This is a bug, please report it."
        )

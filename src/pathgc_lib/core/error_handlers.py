# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys

from .error import PathGCError
from .logger import get_logger
from .repeater import Repeater

logger = get_logger(__name__)


def handle_general_error(
    exception: PathGCError,
    metadata: Repeater,
) -> None:
    """
    Handle pathgc errors that occur while processing one of several step files.
    """
    logger.error(exception)

    # if the operation failed for all items
    if len(metadata.items) == len(metadata.encountered_errors):
        print()
        sys.exit(exception.exit_code)

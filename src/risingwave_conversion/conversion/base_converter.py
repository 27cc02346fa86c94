"""Abstract base class for all version converters."""

from __future__ import annotations

import copy
import logging
from abc import ABC
from typing import TypeVar

T = TypeVar("T")


class BaseConverter(ABC):
    """
    Abstract base class for converting one part of a RisingWave object.

    Converters are stateless: every method is a pure function of its
    arguments and returns freshly allocated models, so a single instance may
    be shared between threads. The only attribute is the logger.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    # --------------------------------------------------------------------- #
    # Shared utility methods for all converters
    # --------------------------------------------------------------------- #

    @staticmethod
    def _copy(value: T) -> T:
        """
        Deep copy a pass-through value.

        Opaque Kubernetes structures (resources, affinity, env, ...) are kept
        as plain dicts and lists; copying them keeps the output independent
        from the input.
        """
        return copy.deepcopy(value)

    def _log_conversion(self, item_type: str, item_id: str, success: bool = True) -> None:
        """
        Log conversion progress for debugging and monitoring.

        Args:
            item_type: Type of item being converted (e.g., "node group", "lock")
            item_id: Identifier of the item
            success: Whether conversion was successful
        """
        if success:
            self.logger.debug("Converted %s: %s", item_type, item_id)
        else:
            self.logger.warning("Failed to convert %s: %s", item_type, item_id)

"""Primary layout axis."""

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class Orientation(str, Enum):
    """Axis along which states are laid out.

    Anything that is not exactly one of the two literal values is treated
    as horizontal. There is no error for a bad orientation.
    """
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def normalize(cls, value: Any) -> "Orientation":
        """Resolve an orientation hint, falling back to HORIZONTAL.

        Args:
            value: Orientation member, literal string, or anything else

        Returns:
            Orientation member
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        if value is not None:
            logger.debug(f"Unrecognized orientation {value!r}, using horizontal")
        return cls.HORIZONTAL

    @property
    def is_horizontal(self) -> bool:
        return self is Orientation.HORIZONTAL

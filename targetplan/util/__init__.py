from .format import (
    degrees_to_dms,
    format_angle,
    hours_to_hms,
)
from .validate import is_true, not_none

__all__ = [
    "degrees_to_dms",
    "format_angle",
    "hours_to_hms",
    "is_true",
    "not_none",
]

"""
Helpers that turn params objects into request bodies.

``prepare_params`` is the single place where a params object is checked and
serialized; transports hand its result straight to the HTTP layer.
"""

from datetime import date
from enum import Enum
import json
from typing import TYPE_CHECKING, Any

from cloudinary_metadata.settings import get_settings
from cloudinary_metadata.utils.errors import InvalidParametersError
from cloudinary_metadata.utils.logging_config import setup_logging

if TYPE_CHECKING:
    from cloudinary_metadata.models.base import BaseParams

# No console handler: records propagate to the caller's logging setup
logger = setup_logging(__name__, console=False)


def get_cloudinary_param(value: Any) -> Any:
    """Map an enum member to its wire string; other values pass through."""
    if isinstance(value, Enum):
        return value.value
    return value


def format_date(value: date) -> str:
    """Render a date as ``yyyy-MM-dd``, dropping any time component."""
    # strftime pads years below 1000 inconsistently across platforms
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def prepare_params(params: "BaseParams") -> dict[str, Any]:
    """
    Check params and build the key-sorted request dictionary.

    Args:
        params: Any params object (field, datasource, entries...)

    Returns:
        Dictionary ready to be sent as the request body

    Raises:
        InvalidParametersError: If ``params.check()`` fails
    """
    name = type(params).__name__
    logger.debug(f"Preparing {name}")

    try:
        params.check()
    except InvalidParametersError as e:
        logger.debug(f"Invalid {name}: {e}")
        raise

    result = params.to_params_dictionary()

    if get_settings().log_params:
        logger.debug(f"{name} -> {result}")

    return result


def to_json_body(params: "BaseParams") -> str:
    """Check params and render them as a compact JSON request body."""
    return json.dumps(prepare_params(params), separators=(",", ":"))

"""Typed accessors over the loosely-typed ``tools/call`` argument mapping.

JSON values stop here: handlers pull ``str``/``int`` out through these
accessors and pass only typed values to the capability.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from medium_mcp.tools.errors import MissingParameterError

logger = logging.getLogger(__name__)


class ToolArguments:
    """Read-only view over one call's arguments."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: Mapping[str, Any] = values or {}

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def string(self, key: str) -> str:
        """Return a required string.

        JSON strings are returned as-is; any other non-null value is returned
        as its JSON text (``42`` -> ``"42"``, ``true`` -> ``"true"``).

        Raises:
            MissingParameterError: If *key* is absent or null.
        """
        value = self._values.get(key)
        if value is None:
            logger.debug("Required parameter %r missing", key)
            raise MissingParameterError(key)
        return _as_text(value)

    def optional_string(self, key: str, default: str) -> str:
        """Return a string, or *default* when absent, null or empty."""
        value = self._values.get(key)
        if value is None:
            return default
        text = _as_text(value)
        return text if text else default

    def optional_int(self, key: str) -> int | None:
        """Return an integer, or ``None`` when absent or not an integer.

        Accepts JSON integers, integral floats, and strings that parse as an
        integer. Never raises.
        """
        value = self._values.get(key)
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                logger.debug("Parameter %r is not an integer: %r", key, value)
                return None
        return None


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)

from __future__ import annotations

from typing import Any, Dict, List, Optional


class FlightlogError(Exception):
    """Base class for errors raised by flightlog."""


class UserNotFoundError(FlightlogError):
    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class MalformedImportError(FlightlogError):
    """The import file could not be parsed at all."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"Invalid JSON found in {platform} file")


class ImportValidationError(FlightlogError):
    """
    The import file parsed but does not have the expected shape.

    `errors` holds the pydantic error dicts (loc, msg, type, ...) so callers
    can point the user at the offending field.
    """

    def __init__(self, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        self.errors = errors or []
        super().__init__(self._summarize(self.errors))

    @staticmethod
    def _summarize(errors: List[Dict[str, Any]]) -> str:
        if not errors:
            return "Import file does not match the expected format"
        parts = []
        for err in errors:
            loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
            parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
        return "; ".join(parts)


class UnsupportedPlatformError(FlightlogError):
    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"No importer registered for platform '{platform}'")

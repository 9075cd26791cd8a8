"""Flight importers for third-party exports, keyed by platform id."""
from typing import Any, Awaitable, Callable, Dict, Optional

from ..errors import UnsupportedPlatformError
from ..models import ImportResult, PlatformOptions
from .milesandmore import process_mandm_file

Importer = Callable[..., Awaitable[ImportResult]]

IMPORTERS: Dict[str, Importer] = {
    "miles-and-more": process_mandm_file,
}


async def process_file(
    platform: str,
    content: str,
    options: Optional[PlatformOptions] = None,
    **kwargs: Any,
) -> ImportResult:
    importer = IMPORTERS.get(platform)
    if importer is None:
        raise UnsupportedPlatformError(platform)
    return await importer(content, options or PlatformOptions(), **kwargs)


__all__ = ["IMPORTERS", "process_file", "process_mandm_file"]

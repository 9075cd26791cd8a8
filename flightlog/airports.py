from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

import aiohttp
from pydantic import BaseModel, ValidationError

from .config import AIRPORT_SERVICE_API_KEY, AIRPORT_SERVICE_TIMEOUT, AIRPORT_SERVICE_URL
from .logging_utils import log_event

logger = logging.getLogger("flightlog.airports")


class Airport(BaseModel):
    id: Union[int, str]
    iata: Optional[str] = None
    icao: Optional[str] = None
    name: Optional[str] = None


# IATA code -> airport, or None when the service does not know it
AirportLookup = Callable[[str], Awaitable[Optional[Airport]]]


class StaticAirportLookup:
    """In-memory lookup keyed by IATA code."""

    def __init__(self, airports: Mapping[str, Airport]) -> None:
        self._airports: Dict[str, Airport] = {k.upper(): v for k, v in airports.items()}

    async def __call__(self, iata: str) -> Optional[Airport]:
        return self._airports.get((iata or "").strip().upper())


class AirportServiceClient:
    """
    Read-only client for the airport lookup service.

    Endpoint used:
      - GET /airports/iata/{code}  -> 200 airport JSON, 404 unknown

    A failed lookup is an ordinary "unknown airport" outcome: no retries and
    no caching happen here.
    """

    def __init__(
        self,
        base_url: str = AIRPORT_SERVICE_URL,
        api_key: Optional[str] = AIRPORT_SERVICE_API_KEY,
        timeout: float = AIRPORT_SERVICE_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = {"Accept": "application/json"}
        if api_key:
            self._headers["x-apikey"] = api_key
        self._timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "AirportServiceClient":
        timeout = aiohttp.ClientTimeout(total=self._timeout, connect=3)
        self._session = aiohttp.ClientSession(headers=self._headers, timeout=timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session:
            await self._session.close()
            self._session = None

    async def __call__(self, iata: str) -> Optional[Airport]:
        return await self.get_from_iata(iata)

    async def get_from_iata(self, iata: str) -> Optional[Airport]:
        if not self._session:
            raise RuntimeError("AirportServiceClient used outside 'async with'")

        code = (iata or "").strip().upper()
        if not code:
            return None

        url = f"{self._base_url}/airports/iata/{code}"
        t0 = time.perf_counter()
        try:
            async with self._session.get(url) as r:
                status = r.status
                body: Any = await r.json(content_type=None) if status == 200 else None
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            log_event(
                logger,
                "airport_lookup_error",
                level=logging.WARNING,
                iata=code,
                error=f"{e.__class__.__name__}: {e}",
            )
            return None
        elapsed = time.perf_counter() - t0

        log_event(
            logger,
            "airport_lookup",
            level=logging.DEBUG,
            iata=code,
            status=status,
            took_ms=int(elapsed * 1000),
        )

        if status == 404 or (status == 200 and not body):
            return None
        if status != 200:
            log_event(
                logger,
                "airport_lookup_failed",
                level=logging.WARNING,
                iata=code,
                status=status,
            )
            return None

        try:
            return Airport.model_validate(body)
        except ValidationError as e:
            log_event(
                logger,
                "airport_lookup_bad_payload",
                level=logging.WARNING,
                iata=code,
                error=str(e),
            )
            return None

"""Client facade for the EskomSePush API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import aiohttp

from .endpoint import (
    EndpointRequest,
    area_information_request,
    areas_nearby_request,
    areas_search_request,
    check_allowance_request,
    status_request,
    topics_nearby_request,
)
from .exceptions import ValidationError
from .executor import DEFAULT_TIMEOUT, RequestExecutor, normalize_base_url
from .fixtures import load_fixture
from .mapping import (
    map_area_information,
    map_areas_nearby,
    map_areas_search,
    map_check_allowance,
    map_status,
    map_topics_nearby,
)
from .models import (
    AreaInformation,
    AreasNearby,
    AreasSearch,
    AreaTestMode,
    CheckAllowance,
    Status,
    TopicsNearby,
)

_LOGGER = logging.getLogger(__name__)
_T = TypeVar("_T")


class EskomSePush:
    """Facade for the EskomSePush business API.

    Tokens are obtained from https://eskomsepush.gumroad.com/l/api. With
    ``offline=True`` every call returns data decoded from bundled JSON
    documents instead of calling the API; that data is fixed and does not
    reflect real load-shedding.
    """

    def __init__(
        self,
        token: str | None,
        *,
        offline: bool = False,
        session: aiohttp.ClientSession | None = None,
        base_url: str | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
        lenient_timestamps: bool = False,
    ) -> None:
        if not offline and (not isinstance(token, str) or not token.strip()):
            raise ValidationError("token is required unless offline is set.")
        self._token = token or ""
        self._offline = offline
        self._session = session
        self._owns_session = session is None
        self._base_url = normalize_base_url(base_url)
        self._timeout = timeout or DEFAULT_TIMEOUT
        self._lenient_timestamps = lenient_timestamps
        self._executor: RequestExecutor | None = None

    @property
    def offline(self) -> bool:
        return self._offline

    async def __aenter__(self) -> EskomSePush:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._executor = None

    async def status(self) -> Status:
        """Current and upcoming stages for the national grid and Cape Town.

        ``eskom`` is the national status; other keys are municipal overrides.
        """
        return await self._call("status", status_request(), map_status)

    async def area_information(
        self,
        area_id: str,
        test: AreaTestMode | str | None = None,
    ) -> AreaInformation:
        """Events and weekly schedule for an area id from a nearby or text search.

        ``test`` requests sample events from the API; the returned area name is
        then prefixed with ``TESTING`` and the call does not count towards the
        quota.
        """
        request = area_information_request(area_id, test)
        return await self._call("area_information", request, map_area_information)

    async def areas_nearby(self, latitude: float, longitude: float) -> AreasNearby:
        """Areas near GPS coordinates, closest first."""
        request = areas_nearby_request(latitude, longitude)
        return await self._call("areas_nearby", request, map_areas_nearby)

    async def areas_search(self, text: str) -> AreasSearch:
        request = areas_search_request(text)
        return await self._call("areas_search", request, map_areas_search)

    async def topics_nearby(self, latitude: float, longitude: float) -> TopicsNearby:
        """User-reported topics near GPS coordinates."""
        request = topics_nearby_request(latitude, longitude)
        return await self._call("topics_nearby", request, map_topics_nearby)

    async def check_allowance(self) -> CheckAllowance:
        """Quota usage for the token. This call does not count towards the quota."""
        return await self._call("check_allowance", check_allowance_request(), map_check_allowance)

    async def _call(
        self,
        operation: str,
        request: EndpointRequest,
        mapper: Callable[..., _T],
    ) -> _T:
        _LOGGER.debug("Operation %s started (offline=%s)", operation, self._offline)
        source, data = await self._fetch(request)
        result = mapper(data, source, lenient_timestamps=self._lenient_timestamps)
        _LOGGER.debug("Operation %s completed", operation)
        return result

    async def _fetch(self, request: EndpointRequest) -> tuple[str, Any]:
        if self._offline:
            return await asyncio.to_thread(load_fixture, request.endpoint)
        executor = self._ensure_executor()
        data = await executor.execute(request)
        return executor.build_url(request), data

    def _ensure_executor(self) -> RequestExecutor:
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        if self._executor is None:
            self._executor = RequestExecutor(
                self._session,
                self._token,
                base_url=self._base_url,
                timeout=self._timeout,
            )
        return self._executor

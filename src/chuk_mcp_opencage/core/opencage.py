"""
Low-level async HTTP client for the OpenCage geocoding API.

One GET per call: no caching, no rate limiting, no retries.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from ..constants import ErrorMessages, OpenCageConfig

logger = logging.getLogger(__name__)


@dataclass
class ApiResponse:
    """A single OpenCage HTTP exchange."""

    status_code: int
    reason: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    data: dict[str, Any] | None = None


class OpenCageClient:
    """Async HTTP client for the OpenCage geocoding API.

    The API key is supplied once at construction and appended to every
    request. Public URLs returned to callers have the key redacted.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OpenCageConfig.BASE_URL,
        user_agent: str = OpenCageConfig.USER_AGENT,
    ):
        self._api_key = api_key
        self._base_url = base_url
        self._user_agent = user_agent
        self._client: httpx.AsyncClient | None = None

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazily create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(headers={"User-Agent": self._user_agent})
        return self._client

    def public_url(self, params: dict) -> str:
        """Build the request URL with the API key replaced by a placeholder."""
        redacted = {**params, "key": OpenCageConfig.REDACTED_KEY}
        return str(httpx.URL(self._base_url, params=redacted))

    async def _send(self, params: dict) -> ApiResponse:
        """Issue one GET and wrap the response; transport failures raise."""
        client = await self._get_client()
        query = {**params, "key": self._api_key}
        logger.debug("OpenCage request: %s", self.public_url(params))
        try:
            response = await client.get(self._base_url, params=query)
        except httpx.HTTPError as e:
            raise ConnectionError(ErrorMessages.NETWORK_ERROR.format(e)) from e

        return ApiResponse(
            status_code=response.status_code,
            reason=response.reason_phrase,
            url=self.public_url(params),
            headers={k.lower(): v for k, v in response.headers.items()},
            data=self._parse_json(response),
        )

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict[str, Any] | None:
        """Decode the body; None when the body is not a JSON object."""
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    @staticmethod
    def _status_message(api: ApiResponse) -> str:
        """Prefer the API's own status message over the HTTP reason phrase."""
        if api.data:
            status = api.data.get("status") or {}
            if status.get("message"):
                return str(status["message"])
        return api.reason

    async def geocode(
        self,
        query: str,
        language: str = OpenCageConfig.DEFAULT_LANGUAGE,
        limit: int = OpenCageConfig.DEFAULT_LIMIT,
        countrycode: str | None = None,
        bounds: str | None = None,
        no_annotations: bool = False,
    ) -> ApiResponse:
        """Forward or reverse geocode through the single OpenCage endpoint.

        Reverse lookups pass ``"<lat>,<lng>"`` as the query.

        Args:
            query: Free-form address, place name, or coordinate pair
            language: IETF language tag for results (e.g. "en", "de")
            limit: Maximum number of results (1-100)
            countrycode: Comma-separated ISO 3166-1 alpha-2 codes
            bounds: "min_lon,min_lat,max_lon,max_lat" search hint
            no_annotations: Ask the API to omit annotations

        Returns:
            ApiResponse whose ``data`` holds the decoded JSON body

        Raises:
            ConnectionError: On network or timeout failure
            RuntimeError: On a non-200 HTTP status, an error status in the
                body, or a body that is not valid JSON
        """
        params: dict[str, str | int] = {"q": query, "language": language, "limit": limit}
        if countrycode:
            params["countrycode"] = countrycode
        if bounds:
            params["bounds"] = bounds
        if no_annotations:
            params["no_annotations"] = 1

        api = await self._send(params)
        if api.status_code != 200:
            raise RuntimeError(
                ErrorMessages.API_ERROR.format(api.status_code, self._status_message(api))
            )
        if api.data is None:
            raise RuntimeError(ErrorMessages.INVALID_JSON.format(api.reason))

        body_code = (api.data.get("status") or {}).get("code", 200)
        if body_code != 200:
            raise RuntimeError(ErrorMessages.API_ERROR.format(body_code, self._status_message(api)))
        return api

    async def probe(self) -> ApiResponse:
        """Make a minimal request to read the rate-limit response headers.

        The HTTP status is returned rather than raised so callers can
        report it.
        """
        return await self._send({"q": OpenCageConfig.PROBE_QUERY, "limit": 1})

    async def close(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

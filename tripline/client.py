"""Trip API client - fetch itinerary payloads to annotate."""

import logging
from typing import Any

import httpx

from tripline.config import get_settings
from tripline.models.itinerary import Itinerary

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 10.0


def parse_itinerary_response(data: Any) -> Itinerary:
    """Build an Itinerary from a trip API response body.

    The detail endpoint either wraps the trip as {"itinerary": {...}, ...}
    or returns the trip object itself. Bodies that are not JSON objects fail
    validation.

    Raises:
        pydantic.ValidationError: If the body is not a valid itinerary
    """
    body = (data.get("itinerary") or data) if isinstance(data, dict) else data
    return Itinerary.model_validate(body)


async def fetch_itinerary(
    itinerary_id: int | str,
    client: httpx.AsyncClient,
    authorization: str | None = None,
    api_url: str | None = None,
) -> Itinerary:
    """Fetch one itinerary from the trip API.

    Args:
        itinerary_id: Trip identifier
        client: HTTP client to use
        authorization: Authorization header value forwarded as-is
        api_url: Trip API base URL (defaults to settings.api_url)

    Returns:
        Validated Itinerary

    Raises:
        httpx.HTTPStatusError: If the trip API responds with an error status
        pydantic.ValidationError: If the payload is not a valid itinerary
    """
    base = (api_url if api_url is not None else get_settings().api_url).rstrip("/")
    headers = {"Authorization": authorization} if authorization else {}

    response = await client.get(
        f"{base}/itinerary/{itinerary_id}",
        headers=headers,
        timeout=DEFAULT_TIMEOUT_S,
    )
    if response.is_error:
        logger.warning(
            "Trip API returned %s for itinerary %s", response.status_code, itinerary_id
        )
    response.raise_for_status()
    return parse_itinerary_response(response.json())

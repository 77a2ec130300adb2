"""
Webflow CMS client.

The submission service only needs one capability from Webflow: create an item
in a collection. That capability is the CollectionItemSink protocol, and
WebflowClient is the httpx implementation used in production. Tests swap in
a fake sink or an httpx.MockTransport.
"""

import logging
from typing import Any, Dict, Optional, Protocol

import httpx

from formbridge.core.errors import TransportError, UpstreamError
from formbridge.models.submission import CmsItemPayload

logger = logging.getLogger(__name__)


class CollectionItemSink(Protocol):
    async def create_item(self, payload: CmsItemPayload) -> Dict[str, Any]:
        ...


class WebflowClient:
    """Creates collection items through the Webflow v2 API. Single attempt, no retries."""

    def __init__(
        self,
        api_token: str,
        collection_id: str,
        base_url: str = "https://api.webflow.com/v2",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_token = api_token
        self.collection_id = collection_id
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    @property
    def items_url(self) -> str:
        return f"{self.base_url}/collections/{self.collection_id}/items"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
            "accept": "application/json",
        }

    async def create_item(self, payload: CmsItemPayload) -> Dict[str, Any]:
        """
        POST one item to the collection.

        Returns:
            dict: the created item as returned by Webflow (contains `id`)

        Raises:
            UpstreamError: Webflow returned a non-success status
            TransportError: the request could not be completed
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.items_url,
                    headers=self._headers(),
                    json=payload.model_dump(),
                )
        except httpx.HTTPError as e:
            logger.error(f"❌ Webflow request failed: {str(e)}")
            raise TransportError(str(e) or "Failed to reach Webflow API") from e

        if not response.is_success:
            error_body = _read_error_body(response)
            logger.error(f"❌ Webflow API error ({response.status_code}): {error_body}")
            raise UpstreamError(response.status_code, error_body)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(response.status_code, response.text) from e


def _read_error_body(response: httpx.Response) -> Any:
    # Webflow error bodies are JSON, but proxies in front of it may not be
    try:
        return response.json()
    except ValueError:
        return response.text

"""
Contentful Delivery API client.

Only the read endpoints needed to discover content types are covered. There
is no retry layer: transport errors are logged with their context and
re-raised to the caller.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp
import requests

from contentful_schema.core import PluginConfig
from contentful_schema.reporting import ContentfulAPIError, Reporter

logger = logging.getLogger(__name__)


class ContentfulClient:
    def __init__(self, space_id: str, access_token: str, environment: str = "master", host: str = "cdn.contentful.com"):
        """
        Initialize the client.

        Args:
            space_id: Contentful space identifier
            access_token: Delivery (or preview) API token
            environment: Space environment, "master" by default
            host: API host, cdn.contentful.com for delivery, preview.contentful.com for preview
        """
        self.space_id = space_id
        self.access_token = access_token
        self.environment = environment
        self.host = host

    @classmethod
    def from_config(cls, plugin_config: PluginConfig) -> "ContentfulClient":
        return cls(
            space_id=plugin_config.space_id,
            access_token=plugin_config.access_token,
            environment=plugin_config.environment,
            host=plugin_config.host,
        )

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/spaces/{self.space_id}/environments/{self.environment}"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    def request(self, path: str, params: Optional[Dict] = None, context: Optional[str] = None) -> Optional[Dict]:
        """
        Make a blocking GET request.

        Returns:
            Parsed JSON body, or None when the request failed
        """
        context_msg = f" [{context}]" if context else ""

        try:
            response = requests.get(f"{self.base_url}{path}", headers=self.headers, params=params, timeout=30)
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error{context_msg}: {e}")
            return None
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout{context_msg}: {e}")
            return None
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error{context_msg}: {e}")
            return None

        if response.status_code != 200:
            logger.error(f"HTTP Error {response.status_code}{context_msg}: {response.text}")
            return None

        return response.json()

    async def request_async(
        self,
        session: aiohttp.ClientSession,
        path: str,
        params: Optional[Dict] = None,
        context: Optional[str] = None,
    ) -> Dict:
        """
        Make a GET request on a shared aiohttp session.

        Raises:
            ContentfulAPIError: The API answered with a non-200 status
            aiohttp.ClientError: Transport failures, re-raised with context
        """
        context_msg = f" [{context}]" if context else ""

        try:
            async with session.get(f"{self.base_url}{path}", headers=self.headers, params=params) as response:
                if response.status != 200:
                    error_text = await response.text()
                    logger.error(f"HTTP Error {response.status}{context_msg}: {error_text}")
                    raise ContentfulAPIError(f"HTTP Error {response.status}{context_msg}: {error_text}", response.status)

                return await response.json()

        except aiohttp.ServerTimeoutError as e:
            logger.error(f"Request timeout{context_msg}: {e}")
            raise aiohttp.ServerTimeoutError(f"Request timeout{context_msg}: {e}") from e
        except aiohttp.ClientConnectionError as e:
            logger.error(f"Connection error{context_msg}: {e}")
            raise aiohttp.ClientConnectionError(f"Connection error{context_msg}: {e}") from e
        except aiohttp.ClientResponseError as e:
            logger.error(f"HTTP response error{context_msg}: {e}")
            raise
        except aiohttp.ClientError as e:
            logger.error(f"Client error{context_msg}: {e}")
            raise
        except asyncio.TimeoutError as e:
            # Total timeout of the session expired
            logger.error(f"Request timeout{context_msg}: {e!r}")
            raise

    async def paged_get_async(self, session: aiohttp.ClientSession, path: str, page_limit: int = 1000) -> List[Dict]:
        """Follow skip/limit pagination until ``total`` items were collected."""
        items: List[Dict] = []
        skip = 0

        while True:
            page = await self.request_async(
                session,
                path,
                params={"skip": skip, "limit": page_limit, "order": "sys.createdAt"},
                context=f"{path} skip={skip}",
            )
            page_items = page.get("items", [])
            items.extend(page_items)
            skip += page_limit

            if not page_items or skip >= page.get("total", 0):
                return items

    def get_content_types(self, page_limit: int = 1000) -> Optional[List[Dict]]:
        """Blocking variant of the content type listing. Returns None on failure."""
        items: List[Dict] = []
        skip = 0

        while True:
            page = self.request("/content_types", {"skip": skip, "limit": page_limit}, context=f"skip={skip}")
            if page is None:
                return None

            page_items = page.get("items", [])
            items.extend(page_items)
            skip += page_limit

            if not page_items or skip >= page.get("total", 0):
                return items


async def fetch_content_types(plugin_config: PluginConfig, reporter: Reporter) -> List[Dict[str, Any]]:
    """Fetch every content type of the configured space environment."""
    client = ContentfulClient.from_config(plugin_config)

    reporter.verbose(f"Fetching content types ({client.base_url})")
    async with aiohttp.ClientSession() as session:
        content_types = await client.paged_get_async(session, "/content_types", plugin_config.page_limit)

    reporter.verbose(f"Content types fetched {len(content_types)}")
    for content_type in content_types:
        reporter.verbose(f"{content_type.get('name')} ({content_type.get('sys', {}).get('id')})")

    return content_types

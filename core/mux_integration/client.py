"""
Mux Video API Client

Thin HTTP client for the parts of the Mux video API the course platform
needs: creating an asset from a source URL with a public playback policy and
deleting an asset. Requests use HTTP basic auth with the Mux access token and
a bounded timeout; every transport or API failure is raised as
VideoProviderError so the calling workflow aborts instead of continuing with
remote and local state out of sync.

Author: Course Platform Team
Version: 1.0.0
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests.auth import HTTPBasicAuth

from ..config import PlatformConfig, get_platform_config
from ..exceptions import VideoProviderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MuxAsset:
    """Identifiers returned by Mux for a newly created asset."""

    asset_id: str
    playback_id: str


class MuxClient:
    """
    Client for the Mux ``/video/v1/assets`` resource.

    Example:
        >>> client = MuxClient()
        >>> asset = client.create_asset("https://cdn.example.com/intro.mp4")
        >>> client.delete_asset(asset.asset_id)
    """

    ASSETS_PATH = "/video/v1/assets"
    PLAYBACK_POLICY = "public"

    def __init__(
        self,
        config: Optional[PlatformConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or get_platform_config()
        self.session = session or requests.Session()
        self.auth = HTTPBasicAuth(self.config.mux_token_id, self.config.mux_token_secret)

    def create_asset(self, source_url: str) -> MuxAsset:
        """
        Create a Mux asset ingesting ``source_url``.

        Returns:
            MuxAsset with the asset id and the first playback id

        Raises:
            VideoProviderError: transport failure, non-2xx answer or a
                response without a playback id
        """
        payload = {
            "input": [{"url": source_url}],
            "playback_policy": [self.PLAYBACK_POLICY],
        }
        data = self._request("POST", self.ASSETS_PATH, json=payload)
        asset = data.get("data") or {}
        playback_ids = asset.get("playback_ids") or []
        if not asset.get("id") or not playback_ids:
            logger.error("Mux create asset returned no ids: %s", data)
            raise VideoProviderError(details={"operation": "create_asset"})

        result = MuxAsset(asset_id=asset["id"], playback_id=playback_ids[0]["id"])
        logger.info("Created Mux asset %s (playback %s)", result.asset_id, result.playback_id)
        return result

    def delete_asset(self, asset_id: str) -> None:
        """
        Delete a Mux asset.

        A 404 answer means the asset is already gone and is not an error.
        """
        path = f"{self.ASSETS_PATH}/{asset_id}"
        self._request("DELETE", path, allow_not_found=True)
        logger.info("Deleted Mux asset %s", asset_id)

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        allow_not_found: bool = False,
    ) -> Dict[str, Any]:
        url = f"{self.config.mux_base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                json=json,
                auth=self.auth,
                timeout=self.config.mux_timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("Mux request %s %s failed: %s", method, path, e)
            raise VideoProviderError(
                details={"path": path, "request_error": str(e)}
            ) from e

        if allow_not_found and response.status_code == 404:
            logger.warning("Mux resource %s not found, treating as deleted", path)
            return {}

        if not response.ok:
            logger.error(
                "Mux request %s %s returned %s: %s",
                method,
                path,
                response.status_code,
                response.text[:500],
            )
            raise VideoProviderError(
                details={"path": path, "status_code": response.status_code}
            )

        if response.status_code == 204 or not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise VideoProviderError(details={"path": path, "invalid_json": True}) from e

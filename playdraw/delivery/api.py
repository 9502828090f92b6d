import asyncio
import logging
import os
from typing import Any, Mapping, Optional
from urllib.parse import urljoin

import requests
from dotenv import load_dotenv

from ..draw.sampler import DrawResult
from ..errors import ConfigurationError, DeliveryError

logger = logging.getLogger(__name__)

REWARDS_PATH = "/api/v1/giftbox/rewards"


class GiftBoxClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: int = 45,
        session: Optional[requests.Session] = None,
    ):
        load_dotenv()
        url = base_url or os.getenv("GIFTBOX_BASE_URL")
        if not url:
            raise ConfigurationError("Environment variable 'GIFTBOX_BASE_URL' is not set")

        if "://" not in url:
            url = f"https://{url}"
        self.base_url = url.rstrip("/")
        self.token = token if token is not None else os.getenv("GIFTBOX_API_TOKEN")
        self.session = session or requests.Session()
        self.timeout = timeout

    # -------- headers --------
    @property
    def public_headers(self) -> Mapping[str, str]:
        return {"Accept": "application/json"}

    @property
    def auth_headers(self) -> Mapping[str, str]:
        if not self.token:
            return self.public_headers
        return {**self.public_headers, "Authorization": f"Bearer {self.token}"}

    # -------- core request --------
    def _request(
        self,
        method: str,
        path: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
        return_in_json: bool = True,
    ) -> Any:
        url = urljoin(self.base_url + "/", path.lstrip("/"))
        try:
            r = self.session.request(
                method=method.upper(),
                url=url,
                headers=headers or self.public_headers,
                params=params,
                json=json,
                timeout=self.timeout,
            )
            r.raise_for_status()
            if not return_in_json:
                return r.content
            return r.json() if r.content else None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise DeliveryError(
                f"Gift-box service returned HTTP {status} for {method.upper()} {path}",
                status_code=status,
            ) from exc
        except requests.RequestException as exc:
            raise DeliveryError(f"Gift-box service request failed: {exc}") from exc

    # -------- API callers --------
    @staticmethod
    def reward_payload(
        reward_item: DrawResult,
        player_id: str,
        nickname: str,
        reward_label: str,
        source_tag: str,
    ) -> dict:
        return {
            "playerId": player_id,
            "nickname": nickname,
            "rewardLabel": reward_label,
            "sourceTag": source_tag,
            "item": {
                "itemName": reward_item.dropped_item_name,
                "itemId": reward_item.dropped_item_id,
            },
        }

    def post_reward(
        self,
        reward_item: DrawResult,
        player_id: str,
        nickname: str,
        reward_label: str,
        source_tag: str,
    ) -> Any:
        """Blocking delivery call. Raises :class:`DeliveryError` on failure.

        Returns the raw response body; the service acknowledges with JSON or
        plain text and neither is interpreted here.
        """
        payload = self.reward_payload(
            reward_item, player_id, nickname, reward_label, source_tag
        )
        # Never log the bearer token; the payload holds no secrets.
        logger.debug(f"Posting reward for player {player_id}: {payload['item']}")
        return self._request(
            "POST",
            REWARDS_PATH,
            headers=self.auth_headers,
            json=payload,
            return_in_json=False,
        )

    async def send_reward(
        self,
        reward_item: DrawResult,
        player_id: str,
        nickname: str,
        reward_label: str,
        source_tag: str,
    ) -> None:
        await asyncio.to_thread(
            self.post_reward, reward_item, player_id, nickname, reward_label, source_tag
        )
        logger.info(
            f"Delivered {reward_item.dropped_item_name} to player {player_id} ({source_tag})"
        )

import os
import unittest
from unittest.mock import patch

import requests

from playdraw.delivery.api import REWARDS_PATH, GiftBoxClient
from playdraw.draw import DrawResult
from playdraw.errors import ConfigurationError, DeliveryError

REWARD = DrawResult(dropped_item_name="Gold Rifle (rare)", dropped_item_id=1140001)


class DummyResponse:
    def __init__(self, json_data=None, content: bytes = b"", status_code: int = 200):
        self._json = json_data
        if json_data is not None and not content:
            import json as _json

            content = _json.dumps(json_data).encode()
        self.content = content
        self.status_code = status_code

    def json(self):
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class DummySession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, headers=None, params=None, json=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "params": params,
                "json": json,
                "timeout": timeout,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response


class TestGiftBoxClient(unittest.IsolatedAsyncioTestCase):
    @patch("playdraw.delivery.api.load_dotenv")
    def test_requires_base_url(self, mock_load_dotenv):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ConfigurationError):
                GiftBoxClient()

    @patch("playdraw.delivery.api.load_dotenv")
    def test_base_url_from_bare_host(self, mock_load_dotenv):
        with patch.dict(os.environ, {}, clear=True):
            client = GiftBoxClient(base_url="gifts.example.com/", session=DummySession())
        self.assertEqual(client.base_url, "https://gifts.example.com")

    @patch("playdraw.delivery.api.load_dotenv")
    def test_auth_headers_without_token(self, mock_load_dotenv):
        with patch.dict(os.environ, {}, clear=True):
            client = GiftBoxClient(base_url="http://localhost:8000", session=DummySession())
        self.assertNotIn("Authorization", client.auth_headers)

    async def test_send_reward_posts_payload(self):
        session = DummySession(DummyResponse(json_data={"status": "queued"}))
        client = GiftBoxClient(
            base_url="https://gifts.example.com", token="secret", session=session
        )

        await client.send_reward(
            REWARD, "player123", "TestPlayer", "Daily Playtime Reward", "ChestSys"
        )

        self.assertEqual(len(session.calls), 1)
        call = session.calls[0]
        self.assertEqual(call["method"], "POST")
        self.assertEqual(call["url"], "https://gifts.example.com" + REWARDS_PATH)
        self.assertEqual(call["headers"]["Authorization"], "Bearer secret")
        self.assertEqual(
            call["json"],
            {
                "playerId": "player123",
                "nickname": "TestPlayer",
                "rewardLabel": "Daily Playtime Reward",
                "sourceTag": "ChestSys",
                "item": {"itemName": "Gold Rifle (rare)", "itemId": 1140001},
            },
        )
        self.assertEqual(call["timeout"], 45)

    async def test_http_error_becomes_delivery_error(self):
        session = DummySession(DummyResponse(json_data={"detail": "down"}, status_code=503))
        client = GiftBoxClient(base_url="https://gifts.example.com", session=session)

        with self.assertRaises(DeliveryError) as ctx:
            await client.send_reward(REWARD, "p", "n", "label", "tag")

        self.assertEqual(ctx.exception.status_code, 503)
        self.assertIsInstance(ctx.exception.__cause__, requests.HTTPError)

    async def test_connection_error_becomes_delivery_error(self):
        session = DummySession(error=requests.ConnectionError("network unreachable"))
        client = GiftBoxClient(base_url="https://gifts.example.com", session=session)

        with self.assertRaises(DeliveryError) as ctx:
            await client.send_reward(REWARD, "p", "n", "label", "tag")

        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("network unreachable", str(ctx.exception))

    def test_empty_response_body(self):
        session = DummySession(DummyResponse(content=b""))
        client = GiftBoxClient(base_url="https://gifts.example.com", session=session)
        self.assertEqual(client.post_reward(REWARD, "p", "n", "label", "tag"), b"")

    async def test_plain_text_acknowledgement_is_success(self):
        response = requests.Response()
        response.status_code = 200
        response._content = b"OK"
        session = DummySession(response)
        client = GiftBoxClient(base_url="https://gifts.example.com", session=session)

        await client.send_reward(REWARD, "p", "n", "label", "tag")

        self.assertEqual(client.post_reward(REWARD, "p", "n", "label", "tag"), b"OK")
        self.assertEqual(len(session.calls), 2)

    def test_undecodable_json_becomes_delivery_error(self):
        response = requests.Response()
        response.status_code = 200
        response._content = b"OK"
        client = GiftBoxClient(
            base_url="https://gifts.example.com", session=DummySession(response)
        )

        with self.assertRaises(DeliveryError) as ctx:
            client._request("GET", "/status")

        self.assertIsNone(ctx.exception.status_code)
        self.assertIsInstance(ctx.exception.__cause__, requests.RequestException)


if __name__ == "__main__":
    unittest.main()

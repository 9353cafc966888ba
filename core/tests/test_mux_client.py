from unittest import mock

import requests
from django.test import SimpleTestCase

from core.exceptions import VideoProviderError
from core.mux_integration import MuxAsset, MuxClient

from .helpers import make_config


def make_response(status_code=200, payload=None):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.content = b"{}" if payload is None else b"x"
    response.text = ""
    response.json.return_value = payload or {}
    return response


class MuxClientTests(SimpleTestCase):
    def setUp(self):
        self.session = mock.Mock(spec=requests.Session)
        self.client = MuxClient(config=make_config(), session=self.session)

    def test_create_asset_posts_public_playback_policy(self):
        self.session.request.return_value = make_response(
            201, {"data": {"id": "asset-1", "playback_ids": [{"id": "play-1", "policy": "public"}]}}
        )

        asset = self.client.create_asset("https://cdn.example.com/a.mp4")

        self.assertEqual(asset, MuxAsset(asset_id="asset-1", playback_id="play-1"))
        args, kwargs = self.session.request.call_args
        self.assertEqual(args, ("POST", "https://api.mux.test/video/v1/assets"))
        self.assertEqual(
            kwargs["json"],
            {"input": [{"url": "https://cdn.example.com/a.mp4"}], "playback_policy": ["public"]},
        )
        self.assertEqual(kwargs["auth"].username, "token-id")
        self.assertEqual(kwargs["auth"].password, "token-secret")
        self.assertEqual(kwargs["timeout"], 5)

    def test_create_asset_without_playback_id(self):
        self.session.request.return_value = make_response(
            201, {"data": {"id": "asset-1", "playback_ids": []}}
        )

        with self.assertRaises(VideoProviderError):
            self.client.create_asset("https://cdn.example.com/a.mp4")

    def test_api_error_is_raised(self):
        self.session.request.return_value = make_response(401)

        with self.assertRaises(VideoProviderError) as ctx:
            self.client.create_asset("https://cdn.example.com/a.mp4")

        self.assertEqual(ctx.exception.details["status_code"], 401)

    def test_transport_error_is_raised(self):
        self.session.request.side_effect = requests.exceptions.ConnectTimeout("timeout")

        with self.assertRaises(VideoProviderError):
            self.client.delete_asset("asset-1")

    def test_delete_asset(self):
        self.session.request.return_value = make_response(204)

        self.client.delete_asset("asset-1")

        args, _ = self.session.request.call_args
        self.assertEqual(args, ("DELETE", "https://api.mux.test/video/v1/assets/asset-1"))

    def test_delete_missing_asset_is_not_an_error(self):
        self.session.request.return_value = make_response(404)

        self.client.delete_asset("gone")

    def test_delete_server_error_is_raised(self):
        self.session.request.return_value = make_response(500)

        with self.assertRaises(VideoProviderError):
            self.client.delete_asset("asset-1")

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from src.exceptions import DeliveryError
from src.notifications.fcm import DEVICE_NOTIFICATION_TITLE, FcmSender


def make_settings(**overrides):
    fields = {
        "fcm_project_id": "inha-notice",
        "fcm_access_token": "token-123",
        "notification_enabled": True,
        "is_production": True,
    }
    fields.update(overrides)
    return MagicMock(**fields)


def mock_async_client(response=None, side_effect=None):
    mock_client = MagicMock()
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    mock_client.post = AsyncMock(return_value=response, side_effect=side_effect)
    return mock_client


class TestFcmSender:
    @patch("src.notifications.fcm.get_settings")
    def test_is_configured_true(self, mock_settings):
        mock_settings.return_value = make_settings()
        assert FcmSender.is_configured() is True

    @patch("src.notifications.fcm.get_settings")
    def test_is_configured_false_no_token(self, mock_settings):
        mock_settings.return_value = make_settings(fcm_access_token="")
        assert FcmSender.is_configured() is False

    @pytest.mark.asyncio
    @patch("src.notifications.fcm.get_settings")
    async def test_send_to_topic_success(self, mock_settings):
        mock_settings.return_value = make_settings()
        sender = FcmSender()

        mock_response = MagicMock()
        mock_response.raise_for_status = MagicMock()
        mock_response.json.return_value = {"name": "projects/inha-notice/messages/1"}

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_async_client(response=mock_response)
            mock_client_cls.return_value = mock_client

            result = await sender.send_to_topic(
                "CSE", "컴퓨터공학과", "수강신청 안내", {"id": "cse-1"}
            )

        assert result == "projects/inha-notice/messages/1"
        call_args = mock_client.post.call_args
        assert call_args.args[0].endswith("/projects/inha-notice/messages:send")
        assert call_args.kwargs["headers"]["Authorization"] == "Bearer token-123"
        message = call_args.kwargs["json"]["message"]
        assert message["topic"] == "CSE"
        assert message["notification"] == {"title": "컴퓨터공학과", "body": "수강신청 안내"}
        assert message["data"] == {"id": "cse-1"}

    @pytest.mark.asyncio
    @patch("src.notifications.fcm.get_settings")
    async def test_send_to_device_uses_fixed_title(self, mock_settings):
        mock_settings.return_value = make_settings()
        sender = FcmSender()

        mock_response = MagicMock()
        mock_response.json.return_value = {"name": "projects/inha-notice/messages/2"}

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client = mock_async_client(response=mock_response)
            mock_client_cls.return_value = mock_client

            await sender.send_to_device("device-token", "수강신청 안내")

        message = mock_client.post.call_args.kwargs["json"]["message"]
        assert message["token"] == "device-token"
        assert message["notification"]["title"] == DEVICE_NOTIFICATION_TITLE
        assert message["notification"]["body"] == "수강신청 안내"
        assert message["data"] == {}

    @pytest.mark.asyncio
    @patch("src.notifications.fcm.get_settings")
    async def test_skipped_outside_production(self, mock_settings):
        mock_settings.return_value = make_settings(is_production=False)
        sender = FcmSender()

        with patch("httpx.AsyncClient") as mock_client_cls:
            result = await sender.send_to_topic("CSE", "t", "b", {"id": "cse-1"})

        assert result is None
        mock_client_cls.assert_not_called()

    @pytest.mark.asyncio
    @patch("src.notifications.fcm.get_settings")
    async def test_skipped_when_disabled(self, mock_settings):
        mock_settings.return_value = make_settings(notification_enabled=False)
        sender = FcmSender()

        with patch("httpx.AsyncClient") as mock_client_cls:
            result = await sender.send_to_topic("CSE", "t", "b")

        assert result is None
        mock_client_cls.assert_not_called()

    @pytest.mark.asyncio
    @patch("src.notifications.fcm.get_settings")
    async def test_http_error_raises_delivery_error(self, mock_settings):
        mock_settings.return_value = make_settings()
        sender = FcmSender()

        mock_response = MagicMock()
        mock_response.status_code = 404
        mock_response.text = "Requested entity was not found."
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "Not Found", request=MagicMock(), response=mock_response
        )

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client_cls.return_value = mock_async_client(response=mock_response)

            with pytest.raises(DeliveryError) as exc_info:
                await sender.send_to_topic("CSE", "t", "b")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    @patch("src.notifications.fcm.get_settings")
    async def test_request_error_raises_delivery_error(self, mock_settings):
        mock_settings.return_value = make_settings()
        sender = FcmSender()

        with patch("httpx.AsyncClient") as mock_client_cls:
            mock_client_cls.return_value = mock_async_client(
                side_effect=httpx.ConnectError("Connection refused")
            )

            with pytest.raises(DeliveryError):
                await sender.send_to_topic("CSE", "t", "b")

    @pytest.mark.asyncio
    @patch("src.notifications.fcm.get_settings")
    async def test_empty_success_body_raises_delivery_error(self, mock_settings):
        mock_settings.return_value = make_settings()
        sender = FcmSender()

        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b""))
        real_client = httpx.AsyncClient

        with patch(
            "httpx.AsyncClient",
            side_effect=lambda **kwargs: real_client(transport=transport, **kwargs),
        ):
            with pytest.raises(DeliveryError):
                await sender.send_to_topic("CSE", "t", "b", {"id": "cse-1"})

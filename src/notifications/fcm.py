from __future__ import annotations

from typing import Dict, Optional

import httpx
from loguru import logger

from src.config import get_settings
from src.exceptions import DeliveryError

FCM_API_BASE = "https://fcm.googleapis.com/v1"
SEND_MESSAGE_TIMEOUT = 10  # seconds

DEVICE_NOTIFICATION_TITLE = "[인하공지] 새로운 공지사항이 있습니다!"


class FcmSender:
    """Send push notifications via the FCM HTTP v1 API."""

    def __init__(self):
        settings = get_settings()
        self.project_id = settings.fcm_project_id
        self.access_token = settings.fcm_access_token
        self.enabled = settings.notification_enabled and settings.is_production

    @classmethod
    def is_configured(cls) -> bool:
        """Check if FCM credentials are set."""
        settings = get_settings()
        return bool(settings.fcm_project_id and settings.fcm_access_token)

    async def send_to_topic(
        self,
        topic: str,
        title: str,
        body: str,
        data: Optional[Dict[str, str]] = None,
    ) -> Optional[str]:
        """Push a notification to every subscriber of ``topic``.

        Returns:
            FCM message name, or None when sending is disabled.

        Raises:
            DeliveryError: if FCM rejects the message or is unreachable.
        """
        message = {
            "topic": topic,
            "notification": {"title": title, "body": body},
            "data": data or {},
        }
        return await self._send(message)

    async def send_to_device(
        self,
        token: str,
        notice_title: str,
        data: Optional[Dict[str, str]] = None,
    ) -> Optional[str]:
        """Push a notification to a single device registration token."""
        message = {
            "token": token,
            "notification": {"title": DEVICE_NOTIFICATION_TITLE, "body": notice_title},
            "data": data or {},
        }
        return await self._send(message)

    async def _send(self, message: dict) -> Optional[str]:
        notice_id = message["data"].get("id", "-")
        if not self.enabled:
            logger.info(f"Notification disabled in this environment, skipped {notice_id}")
            return None

        url = f"{FCM_API_BASE}/projects/{self.project_id}/messages:send"
        headers = {"Authorization": f"Bearer {self.access_token}"}

        try:
            async with httpx.AsyncClient(timeout=SEND_MESSAGE_TIMEOUT) as client:
                response = await client.post(url, json={"message": message}, headers=headers)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            raise DeliveryError(
                f"FCM API error: {e.response.status_code} - {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise DeliveryError(f"FCM request failed: {e}") from e
        except ValueError as e:
            raise DeliveryError(f"Malformed FCM response: {e}") from e

        name = body.get("name") if isinstance(body, dict) else None
        logger.info(f"Push notification sent: {notice_id} ({name})")
        return name

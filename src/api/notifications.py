from __future__ import annotations

from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel

from src.api.auth import require_admin_key
from src.exceptions import DeliveryError
from src.notifications.fcm import FcmSender
from src.notifications.titles import MAJOR_BROADCAST

router = APIRouter(
    prefix="/api/notifications",
    tags=["notifications"],
    dependencies=[Depends(require_admin_key)],
)


class SendToDeviceRequest(BaseModel):
    token: str
    title: str
    data: Dict[str, str] = {}


class SendToTopicRequest(BaseModel):
    topic: str
    title: str
    data: Dict[str, str] = {}


class SendResponse(BaseModel):
    sent: bool
    message_id: Optional[str] = None


def get_sender() -> FcmSender:
    return FcmSender()


@router.post("/send-to-device", response_model=SendResponse)
async def send_to_device(
    request: SendToDeviceRequest,
    sender: FcmSender = Depends(get_sender),
):
    """단일 디바이스 토큰으로 푸시 알림 전송 (테스트용)"""
    try:
        message_id = await sender.send_to_device(request.token, request.title, request.data)
    except DeliveryError as e:
        logger.error(f"Failed to push to device: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return SendResponse(sent=message_id is not None, message_id=message_id)


@router.post("/send-to-topic", response_model=SendResponse)
async def send_to_topic(
    request: SendToTopicRequest,
    sender: FcmSender = Depends(get_sender),
):
    """토픽 구독자 전체에게 푸시 알림 전송"""
    try:
        message_id = await sender.send_to_topic(
            request.topic,
            MAJOR_BROADCAST.get_title(request.topic),
            request.title,
            request.data,
        )
    except DeliveryError as e:
        logger.error(f"Failed to push to topic {request.topic}: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return SendResponse(sent=message_id is not None, message_id=message_id)

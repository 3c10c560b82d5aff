from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from src.notifications.titles import TitleStrategy
from src.scrapers.base import NotificationPayload


@dataclass
class NotificationMessage:
    title: str
    body: str
    data: Dict[str, str] = field(default_factory=dict)


def build_payload(
    strategy: TitleStrategy, notice: NotificationPayload, category: str
) -> NotificationMessage:
    """Compose the push message for one newly-seen notice.

    Returns:
        NotificationMessage whose title comes from the category's title
        strategy, body is the notice title, and data carries id/link/date.
    """
    return NotificationMessage(
        title=strategy.get_title(category),
        body=notice.title,
        data={
            "id": notice.id,
            "link": notice.link,
            "date": notice.date,
        },
    )

from datetime import datetime, timezone
from typing import Optional
import json
import logging

import redis

from smart_energy.core.config import settings

logger = logging.getLogger(__name__)


class LoggingNotificationService:
    """Delivers alerts to the application log"""

    def __init__(self, logger_name: str = "smart_energy.alerts"):
        self.logger = logging.getLogger(logger_name)

    def send_alert(self, message: str) -> None:
        self.logger.warning(f"ALERT: {message}")


class RedisNotificationService:
    """Publishes alerts on a Redis channel and keeps a capped list of recent ones.

    Redis errors are not caught here; they reach the caller.
    """

    def __init__(
        self,
        client: redis.Redis,
        channel: Optional[str] = None,
        history_key: Optional[str] = None,
        history_size: Optional[int] = None,
    ):
        self.client = client
        self.channel = channel or settings.ALERT_CHANNEL
        self.history_key = history_key or settings.ALERT_HISTORY_KEY
        self.history_size = history_size or settings.ALERT_HISTORY_SIZE

    def send_alert(self, message: str) -> None:
        payload = json.dumps({
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

        receivers = self.client.publish(self.channel, payload)
        self.client.lpush(self.history_key, payload)
        self.client.ltrim(self.history_key, 0, self.history_size - 1)

        logger.info(f"Alert published to {self.channel} ({receivers} subscribers)")

    def recent_alerts(self, count: int = 10) -> list:
        """Most recent alerts, newest first"""
        raw = self.client.lrange(self.history_key, 0, count - 1)
        return [json.loads(item) for item in raw]

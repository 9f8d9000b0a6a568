"""Redis round-trip probe."""

from datetime import datetime

import redis

from ..exceptions import RedisProbeError
from .base import BaseProvider


class RedisProvider(BaseProvider):
    """Writes the current time to Redis and reads it back."""

    name = "redis"
    description = "Write and read back a key in Redis"

    def client(self) -> redis.Redis:
        """Create a client for the configured Redis URL."""
        return redis.Redis.from_url(
            self.settings.redis_url,
            decode_responses=True,
            socket_timeout=5,
        )

    def check(self) -> None:
        key = self.settings.redis_key
        now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        try:
            client = self.client()
            try:
                client.set(key, now)
                fetched = client.get(key)
            finally:
                client.close()
        except Exception as e:
            raise RedisProbeError(str(e)) from e

        if fetched != now:
            raise RedisProbeError(f"different values (now: {now}, fetched: {fetched})")

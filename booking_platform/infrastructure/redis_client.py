"""Redis client factory following Dependency Inversion Principle."""
import logging
import time
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

import redis
from redis.connection import ConnectionPool

from booking_platform.config.settings import Config


logger = logging.getLogger(__name__)


class RedisClientFactory:
    """Process-wide Redis client with connection pooling."""

    _pool: Optional[ConnectionPool] = None
    _client: Optional[redis.Redis] = None

    @classmethod
    def create_pool(cls, url: str, max_connections: int = 50) -> ConnectionPool:
        """
        Create (once) the Redis connection pool.

        Args:
            url: Redis connection URL
            max_connections: Maximum number of connections in pool

        Returns:
            ConnectionPool instance
        """
        if cls._pool is None:
            logger.debug(f"Creating Redis connection pool: {cls.mask_url(url)}")
            cls._pool = ConnectionPool.from_url(
                url,
                max_connections=max_connections,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
                health_check_interval=30,
            )
        return cls._pool

    @staticmethod
    def mask_url(url: str) -> str:
        """Mask the password of a Redis URL for logging."""
        parts = urlsplit(url)
        if parts.password is None:
            return url
        netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
        return urlunsplit(parts._replace(netloc=netloc))

    @classmethod
    def get_client(cls, url: Optional[str] = None, ping_attempts: int = 3) -> Optional[redis.Redis]:
        """
        Get Redis client instance (singleton pattern).

        Args:
            url: Optional Redis URL (uses Config if not provided)
            ping_attempts: Connection checks before giving up

        Returns:
            Redis client instance or None if connection fails
        """
        if cls._client is not None:
            return cls._client

        redis_url = url or Config.REDIS_URL
        if not redis_url:
            logger.warning("REDIS_URL not configured")
            return None

        if not redis_url.startswith(("redis://", "rediss://", "unix://")):
            logger.warning("Invalid Redis URL scheme; expected redis://, rediss:// or unix://")
            return None

        try:
            client = redis.Redis(connection_pool=cls.create_pool(redis_url))
            for attempt in range(1, ping_attempts + 1):
                try:
                    client.ping()
                    break
                except redis.ConnectionError:
                    if attempt == ping_attempts:
                        raise
                    logger.debug(f"Redis ping failed (attempt {attempt}/{ping_attempts}), retrying...")
                    time.sleep(1)
        except redis.AuthenticationError as e:
            logger.error(f"Redis authentication failed for {cls.mask_url(redis_url)}: {e}")
            cls.close()
            return None
        except redis.ConnectionError as e:
            logger.warning(f"Failed to connect to Redis at {cls.mask_url(redis_url)}: {e}")
            cls.close()
            return None

        logger.info("Redis connection established successfully")
        cls._client = client
        return cls._client

    @classmethod
    def close(cls) -> None:
        """Close Redis connections."""
        if cls._client:
            cls._client.close()
            cls._client = None
        if cls._pool:
            cls._pool.disconnect()
            cls._pool = None

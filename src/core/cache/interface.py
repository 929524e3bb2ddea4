from abc import ABC, abstractmethod


class KeyValueCache(ABC):
    """TTL-bounded string cache. Callers own value serialization."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent or expired."""

    @abstractmethod
    def set(self, key: str, value: str, ttl: int | None = None) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> None: ...

    @abstractmethod
    def ping(self) -> bool: ...

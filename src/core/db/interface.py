from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from core.models import SavedListEntry, Trip, User

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


class NotFound:
    """Lookup variant for an absent record."""

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

Lookup = Found[T] | NotFound


class TripStore(ABC):
    """Durable storage for users, trips and saved-list entries.

    Absence is reported as NOT_FOUND, never raised. Backend failures raise StoreError.
    """

    @abstractmethod
    def find_user(self, user_id: int) -> Lookup[User]: ...

    @abstractmethod
    def find_trip(self, trip_id: str) -> Lookup[Trip]: ...

    @abstractmethod
    def find_trips(self, trip_ids: Iterable[str]) -> list[Trip]: ...

    @abstractmethod
    def create_trip(self, trip: Trip) -> Trip | None: ...

    @abstractmethod
    def list_entries(self, user_id: int) -> list[SavedListEntry]: ...

    @abstractmethod
    def find_entry(self, user_id: int, trip_id: str) -> Lookup[SavedListEntry]: ...

    @abstractmethod
    def create_entry(self, user_id: int, trip_id: str) -> SavedListEntry | None:
        """Save the pair. Saving an existing pair returns the existing entry."""

    @abstractmethod
    def delete_entry(self, user_id: int, trip_id: str) -> None: ...

    @abstractmethod
    def health_check(self) -> bool: ...

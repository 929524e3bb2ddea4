"""
Pydantic models for Wayfarer.
"""

from core.models.requests import ExportQuery, ListQuery, TripIdPayload, TripRef, TripSearchQuery
from core.models.responses import ErrorPayload, ExportFile, OperationResult, PaginationLinks, SuccessPayload
from core.models.trip import LIST_ITEM_FIELDS, MergedListItem, SavedListEntry, Trip, User

__all__ = [
    "LIST_ITEM_FIELDS",
    "ErrorPayload",
    "ExportFile",
    "ExportQuery",
    "ListQuery",
    "MergedListItem",
    "OperationResult",
    "PaginationLinks",
    "SavedListEntry",
    "SuccessPayload",
    "Trip",
    "TripIdPayload",
    "TripRef",
    "TripSearchQuery",
    "User",
]

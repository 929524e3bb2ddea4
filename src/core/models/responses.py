"""Response envelope models shared by every public operation."""

from typing import Any

from pydantic import BaseModel, Field


class PaginationLinks(BaseModel):
    self: str
    first: str
    prev: str | None
    next: str | None
    last: str
    total_pages: int = Field(serialization_alias="totalPages")


class SuccessPayload(BaseModel):
    data: Any
    message: str
    links: PaginationLinks | None = None


class ErrorPayload(BaseModel):
    error: str
    message: str
    detail: str


class ExportFile(BaseModel):
    content: bytes
    content_type: str
    filename: str

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'


class OperationResult(BaseModel):
    data: SuccessPayload | ErrorPayload | ExportFile
    code: int

    @property
    def ok(self) -> bool:
        return self.code < 400

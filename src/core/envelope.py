"""
Operation result envelopes.

Every public engine operation returns an OperationResult ``{data, code}``
and never raises: ``handles_failures`` converts typed errors into their
error payload and any other exception into INTERNAL_ERROR.
"""

import functools
import json
import logging
from collections.abc import Callable
from typing import Any, ParamSpec

from core.errors import InternalFailureError, NotFoundError, WayfarerError
from core.models import ExportFile, OperationResult, PaginationLinks, SuccessPayload

logger = logging.getLogger(__name__)

P = ParamSpec("P")


def build_success(data: Any, message: str, code: int = 200, links: PaginationLinks | None = None) -> OperationResult:
    return OperationResult(data=SuccessPayload(data=data, message=message, links=links), code=code)


def build_pagination_links(route: str, page: int, limit: int, total_pages: int) -> PaginationLinks:
    return PaginationLinks(
        self=f"{route}?page={page}&limit={limit}",
        first=f"{route}?page=1&limit={limit}",
        prev=f"{route}?page={page - 1}&limit={limit}" if page > 1 else None,
        next=f"{route}?page={page + 1}&limit={limit}" if page + 1 <= total_pages else None,
        last=f"{route}?page={total_pages}&limit={limit}",
        total_pages=total_pages,
    )


def handles_failures(func: Callable[P, OperationResult]) -> Callable[P, OperationResult]:
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> OperationResult:
        try:
            return func(*args, **kwargs)
        except NotFoundError as e:
            logger.info("%s: %s", func.__qualname__, e.message)
            return e.to_result()
        except WayfarerError as e:
            logger.error("%s failed: %s", func.__qualname__, e.message)
            return e.to_result()
        except Exception:
            logger.exception("Unexpected error in %s", func.__qualname__)
            return InternalFailureError("Unexpected error").to_result()

    return wrapper


def to_api_response(result: OperationResult) -> dict[str, Any]:
    """Render an OperationResult as an API Gateway proxy response."""
    if isinstance(result.data, ExportFile):
        return {
            "statusCode": result.code,
            "headers": {
                "Content-Type": result.data.content_type,
                "Content-Disposition": result.data.content_disposition,
            },
            "body": result.data.content.decode("utf-8"),
        }

    payload = result.data.model_dump(mode="json", by_alias=True)
    if isinstance(result.data, SuccessPayload) and result.data.links is None:
        del payload["links"]
    body = {"data": payload, "code": result.code}
    return {
        "statusCode": result.code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }

"""GET /health — cache and store liveness."""

import json
import logging
from typing import Any

from core.container import get_services
from core.services.health import check_health

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    services = get_services()
    status = check_health(services.cache, services.store)
    healthy = all(status.values())
    if not healthy:
        logger.error("Health check failed: %s", status)

    return {
        "statusCode": 200 if healthy else 503,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(status),
    }

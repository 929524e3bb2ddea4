"""Lazy-initialized backend clients — reused across warm Lambda invocations."""

from functools import lru_cache

import redis
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from core.config import get_config
from core.db import build_engine


@lru_cache(maxsize=1)
def get_redis_client() -> redis.Redis:
    config = get_config()
    return redis.Redis(
        host=config.redis_host,
        port=config.redis_port,
        password=config.redis_password or None,
        decode_responses=True,
        socket_connect_timeout=5,
    )


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return build_engine(get_config())


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), expire_on_commit=False)

from os import environ

import boto3
from pydantic import BaseModel, ConfigDict
from sqlalchemy.engine import URL

_cached_api_token: str | None = None


def _resolve_api_token() -> str:
    """Fetch the trip provider API token from Secrets Manager at runtime, with caching."""
    global _cached_api_token
    if _cached_api_token is not None:
        return _cached_api_token

    # Local dev: use env var directly
    direct = environ.get("API_TOKEN", "")
    if direct:
        _cached_api_token = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("API_TOKEN_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_api_token = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_api_token


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    environment: str
    log_level: str = "INFO"
    database_host: str
    database_port: int
    database_name: str
    database_user: str
    database_password: str
    database_secret_arn: str | None = None
    redis_host: str
    redis_port: int
    redis_password: str = ""
    redis_ttl: int
    api_url: str
    api_path: str
    api_token: str = ""
    provider_timeout: float

    @property
    def database_url(self) -> URL:
        return URL.create(
            "postgresql+psycopg",
            username=self.database_user,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
        )


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config, _cached_api_token
    _cached_config = None
    _cached_api_token = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        environment=environ.get("ENVIRONMENT", "local"),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        database_host=environ.get("DATABASE_HOST", "localhost"),
        database_port=int(environ.get("DATABASE_PORT", "5432")),
        database_name=environ.get("DATABASE_NAME", "wayfarer"),
        database_user=environ.get("DATABASE_USER", "wayfarer"),
        database_password=environ.get("DATABASE_PASSWORD", "localdev"),
        database_secret_arn=environ.get("DATABASE_SECRET_ARN"),
        redis_host=environ.get("REDIS_HOST", "localhost"),
        redis_port=int(environ.get("REDIS_PORT", "6379")),
        redis_password=environ.get("REDIS_PASSWORD", ""),
        redis_ttl=int(environ.get("REDIS_TTL", "360")),
        api_url=environ.get("API_URL", "http://localhost:3000"),
        api_path=environ.get("API_PATH", "/api"),
        api_token=_resolve_api_token(),
        provider_timeout=float(environ.get("PROVIDER_TIMEOUT", "10")),
    )
    return _cached_config

"""
목적: 환경 변수 키와 설정 레코드 속성의 대응 표를 정의한다.
설명: 각 항목은 환경 변수 키, 레코드 속성 이름, 값 종류, 필수 여부를 가진다.
      JWT TTL은 입력 방식(기간 문자열 / 단위 개수)별로 별도 표를 둔다.
디자인 패턴: 테이블 기반 설정
참조: src/service_config/shared/config/models.py, src/service_config/shared/config/loader.py
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional


class FieldKind(str, Enum):
    """환경 변수 값 종류."""

    STRING = "string"
    SECRET = "secret"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DURATION = "duration"


class TtlInputStyle(str, Enum):
    """JWT TTL 입력 방식.

    DURATION은 `JWT_TTL=15m`, `JWT_REFRESH_TTL=168h` 같은 기간 문자열을 읽는다.
    UNIT_COUNT는 `JWT_TTL_MINUTES`, `JWT_REFRESH_DAYS` 정수 키를 읽는다.
    """

    DURATION = "duration"
    UNIT_COUNT = "unit_count"


@dataclass(frozen=True)
class EnvField:
    """환경 변수 하나와 레코드 속성 하나의 대응."""

    attr: str
    key: str
    kind: FieldKind
    required: bool = False
    ttl_style: Optional[TtlInputStyle] = None


@dataclass(frozen=True)
class UnitCountField:
    """정수 개수 x 단위로 기간을 조립하는 구형 TTL 입력."""

    attr: str
    key: str
    unit: timedelta
    default_count: int


ENV_FIELDS: tuple[EnvField, ...] = (
    # Database
    EnvField("db_url", "DB_URL", FieldKind.STRING, required=True),
    EnvField("dev_postgres_dsn", "DEV_POSTGRES_DSN", FieldKind.STRING),
    EnvField("wish_postgres_dsn", "WISH_POSTGRES_DSN", FieldKind.STRING),
    EnvField("db_max_open_conns", "DB_MAX_OPEN_CONNS", FieldKind.INTEGER),
    EnvField("db_max_idle_conns", "DB_MAX_IDLE_CONNS", FieldKind.INTEGER),
    EnvField("db_conn_max_lifetime", "DB_CONN_MAX_LIFETIME", FieldKind.DURATION),
    EnvField("db_conn_max_idle_time", "DB_CONN_MAX_IDLE_TIME", FieldKind.DURATION),
    # Server
    EnvField("port", "PORT", FieldKind.STRING),
    EnvField("dev_port", "DEV_PORT", FieldKind.STRING),
    EnvField("wish_port", "WISH_PORT", FieldKind.STRING),
    EnvField("read_timeout", "READ_TIMEOUT", FieldKind.DURATION),
    EnvField("write_timeout", "WRITE_TIMEOUT", FieldKind.DURATION),
    EnvField("idle_timeout", "IDLE_TIMEOUT", FieldKind.DURATION),
    EnvField("shutdown_timeout", "SHUTDOWN_TIMEOUT", FieldKind.DURATION),
    # JWT
    EnvField("jwt_secret", "JWT_SECRET", FieldKind.SECRET, required=True),
    EnvField("jwt_ttl", "JWT_TTL", FieldKind.DURATION, ttl_style=TtlInputStyle.DURATION),
    EnvField(
        "jwt_refresh_ttl",
        "JWT_REFRESH_TTL",
        FieldKind.DURATION,
        ttl_style=TtlInputStyle.DURATION,
    ),
    EnvField("jwt_issuer", "JWT_ISSUER", FieldKind.STRING),
    # Redis
    EnvField("redis_addr", "REDIS_ADDR", FieldKind.STRING),
    EnvField("redis_db", "REDIS_DB", FieldKind.INTEGER),
    EnvField("redis_password", "REDIS_PASSWORD", FieldKind.SECRET),
    EnvField("redis_pool_size", "REDIS_POOL_SIZE", FieldKind.INTEGER),
    # Kafka
    EnvField("kafka_addr", "KAFKA_ADDR", FieldKind.STRING),
    EnvField("kafka_consumer_group", "KAFKA_CONSUMER_GROUP", FieldKind.STRING),
    # External services
    EnvField("vira_id_endpoint", "VIRA_ID_ENDPOINT", FieldKind.STRING),
    # Feature flags
    EnvField("enable_debug", "ENABLE_DEBUG", FieldKind.BOOLEAN),
    EnvField("enable_swagger", "ENABLE_SWAGGER", FieldKind.BOOLEAN),
    # Logging
    EnvField("log_level", "LOG_LEVEL", FieldKind.STRING),
    EnvField("log_format", "LOG_FORMAT", FieldKind.STRING),
)

UNIT_COUNT_TTL_FIELDS: tuple[UnitCountField, ...] = (
    UnitCountField("jwt_ttl", "JWT_TTL_MINUTES", timedelta(minutes=1), 15),
    UnitCountField("jwt_refresh_ttl", "JWT_REFRESH_DAYS", timedelta(hours=24), 7),
)

REQUIRED_FIELDS: tuple[EnvField, ...] = tuple(field for field in ENV_FIELDS if field.required)


def ttl_keys_for(style: TtlInputStyle) -> tuple[str, ...]:
    """주어진 입력 방식이 읽는 TTL 환경 변수 키를 반환한다."""

    if style is TtlInputStyle.UNIT_COUNT:
        return tuple(field.key for field in UNIT_COUNT_TTL_FIELDS)
    return tuple(field.key for field in ENV_FIELDS if field.ttl_style is TtlInputStyle.DURATION)

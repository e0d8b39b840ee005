"""
목적: 설정 레코드의 교차 필드 불변식을 검증한다.
설명: 모든 필드 해석이 끝난 뒤 한 번 실행되며, 첫 번째 위반에서 치명 오류를 올린다.
디자인 패턴: 규칙 객체
참조: src/service_config/shared/config/loader.py, src/service_config/shared/config/errors.py
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable

from service_config.shared.config.duration import format_duration
from service_config.shared.config.errors import InvalidCrossFieldInvariantError
from service_config.shared.config.models import ConfigurationRecord


@dataclass(frozen=True)
class CrossFieldInvariant:
    """여러 필드에 걸친 일관성 규칙이다."""

    name: str
    description: str
    holds: Callable[[ConfigurationRecord], bool]
    offending_values: Callable[[ConfigurationRecord], Dict[str, Any]]


JWT_REFRESH_TTL_EXCEEDS_JWT_TTL = CrossFieldInvariant(
    name="jwt_refresh_ttl_exceeds_jwt_ttl",
    description="JWT refresh TTL은 JWT TTL보다 커야 합니다.",
    holds=lambda record: record.jwt_refresh_ttl > record.jwt_ttl,
    offending_values=lambda record: {
        "JWT_TTL": format_duration(record.jwt_ttl),
        "JWT_REFRESH_TTL": format_duration(record.jwt_refresh_ttl),
    },
)

DB_IDLE_CONNS_WITHIN_OPEN_CONNS = CrossFieldInvariant(
    name="db_idle_conns_within_open_conns",
    description="DB_MAX_IDLE_CONNS는 DB_MAX_OPEN_CONNS보다 클 수 없습니다.",
    holds=lambda record: record.db_max_idle_conns <= record.db_max_open_conns,
    offending_values=lambda record: {
        "DB_MAX_IDLE_CONNS": record.db_max_idle_conns,
        "DB_MAX_OPEN_CONNS": record.db_max_open_conns,
    },
)

DEFAULT_INVARIANTS: tuple[CrossFieldInvariant, ...] = (
    JWT_REFRESH_TTL_EXCEEDS_JWT_TTL,
    DB_IDLE_CONNS_WITHIN_OPEN_CONNS,
)


def validate_invariants(
    record: ConfigurationRecord,
    invariants: Iterable[CrossFieldInvariant] = DEFAULT_INVARIANTS,
) -> None:
    """불변식을 순서대로 검사한다.

    Raises:
        InvalidCrossFieldInvariantError: 위반된 첫 번째 불변식.
    """

    for invariant in invariants:
        if not invariant.holds(record):
            raise InvalidCrossFieldInvariantError(
                invariant=invariant.name,
                description=invariant.description,
                values=invariant.offending_values(record),
            )

"""
목적: 설정 레코드 모델의 불변성과 비밀 값 보호를 검증한다.
설명: 생성 후 변경 불가, DSN 기본값 규칙, repr 마스킹, 로그 요약 구성을 확인한다.
디자인 패턴: 데이터 전송 객체(DTO) 테스트
참조: src/service_config/shared/config/models.py
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from service_config.shared.config import ConfigurationRecord


def _record(**overrides) -> ConfigurationRecord:
    values = {"db_url": "postgres://primary", "jwt_secret": "top-secret"}
    values.update(overrides)
    return ConfigurationRecord(**values)


def test_record_is_frozen() -> None:
    """생성된 레코드는 속성 변경을 거부한다."""

    record = _record()

    with pytest.raises(ValidationError):
        record.port = "9999"


def test_unknown_fields_are_rejected() -> None:
    """정의되지 않은 필드는 허용하지 않는다."""

    with pytest.raises(ValidationError):
        _record(unexpected="value")


def test_dsn_fields_follow_db_url_when_empty() -> None:
    """보조 DSN이 비어 있으면 db_url 값을 사용한다."""

    record = _record(wish_postgres_dsn="postgres://wish")

    assert record.dev_postgres_dsn == "postgres://primary"
    assert record.wish_postgres_dsn == "postgres://wish"


def test_secret_fields_are_masked_in_repr() -> None:
    """repr/str에 비밀 값이 나타나지 않는다."""

    record = _record(redis_password="redis-secret")

    assert "top-secret" not in repr(record)
    assert "redis-secret" not in str(record)
    assert record.jwt_secret.get_secret_value() == "top-secret"


def test_log_summary_excludes_secrets_and_dsns() -> None:
    """로그 요약에는 비밀 값과 DSN이 들어가지 않는다."""

    record = _record(redis_password="redis-secret", jwt_ttl=timedelta(minutes=20))

    summary = record.log_summary()
    flattened = repr(summary)

    assert "top-secret" not in flattened
    assert "redis-secret" not in flattened
    assert "postgres://primary" not in flattened
    assert summary["jwt"]["ttl"] == "20m0s"
    assert set(summary) == {"server", "timeouts", "jwt", "redis", "kafka", "db", "features", "logging"}

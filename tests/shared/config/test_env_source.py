"""
목적: 환경 조회 소스의 우선순위와 조회 규칙을 검증한다.
설명: 프로세스 환경 변수가 오버라이드 파일 값보다 항상 우선하는지, 빈 값 처리와 export 동작을 확인한다.
디자인 패턴: 어댑터 패턴 테스트
참조: src/service_config/shared/config/env_source.py
"""

from __future__ import annotations

import os

import pytest

from service_config.shared.config import EnvironmentSource, OverrideFileLoader
from service_config.shared.config.env_source import lookup_value
from service_config.shared.logging import InMemoryLogger


def test_process_environment_is_never_overwritten_by_file(tmp_path, memory_logger: InMemoryLogger) -> None:
    """같은 키가 양쪽에 있으면 프로세스 환경 변수 값이 유지된다."""

    (tmp_path / ".env").write_text("PORT=9000\nWISH_PORT=9002\n", encoding="utf-8")
    loader = OverrideFileLoader(logger=memory_logger, base_dir=tmp_path)

    source = EnvironmentSource.from_process(environ={"PORT": "8081"}, override_loader=loader)

    assert source["PORT"] == "8081"
    assert source["WISH_PORT"] == "9002"


def test_defined_but_empty_process_value_still_wins(tmp_path, memory_logger: InMemoryLogger) -> None:
    """빈 문자열로 정의된 키도 파일 값으로 채워지지 않는다."""

    (tmp_path / ".env").write_text("JWT_SECRET=from-file\n", encoding="utf-8")
    loader = OverrideFileLoader(logger=memory_logger, base_dir=tmp_path)

    source = EnvironmentSource.from_process(environ={"JWT_SECRET": ""}, override_loader=loader)

    assert source["JWT_SECRET"] == ""
    assert lookup_value(source, "JWT_SECRET") is None


def test_from_process_reads_os_environ_by_default(
    tmp_path, memory_logger: InMemoryLogger, monkeypatch: pytest.MonkeyPatch
) -> None:
    """environ을 생략하면 os.environ을 기준으로 삼는다."""

    monkeypatch.setenv("KAFKA_CONSUMER_GROUP", "from-process")
    (tmp_path / ".env").write_text("KAFKA_CONSUMER_GROUP=from-file\n", encoding="utf-8")
    loader = OverrideFileLoader(logger=memory_logger, base_dir=tmp_path)

    source = EnvironmentSource.from_process(override_loader=loader)

    assert source["KAFKA_CONSUMER_GROUP"] == "from-process"


def test_source_is_a_snapshot() -> None:
    """생성 이후 원본 매핑 변경은 반영되지 않는다."""

    original = {"PORT": "8080"}
    source = EnvironmentSource(original)
    original["PORT"] = "9999"

    assert source["PORT"] == "8080"
    assert len(source) == 1
    assert list(source) == ["PORT"]


def test_export_to_only_fills_missing_keys() -> None:
    """export_to는 대상에 없는 키만 채운다."""

    source = EnvironmentSource({"PORT": "9000", "DEV_PORT": "9003"})
    target = {"PORT": "8080"}

    exported = source.export_to(target)

    assert exported == ["DEV_PORT"]
    assert target == {"PORT": "8080", "DEV_PORT": "9003"}


def test_export_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """os.environ에도 동일한 규칙으로 반영된다."""

    # setenv 후 delenv로 테스트 종료 시 키가 제거되도록 monkeypatch에 기록한다.
    monkeypatch.setenv("SERVICE_CONFIG_TEST_KEY", "placeholder")
    monkeypatch.delenv("SERVICE_CONFIG_TEST_KEY")
    source = EnvironmentSource({"SERVICE_CONFIG_TEST_KEY": "value"})

    source.export_to(os.environ)

    assert os.environ["SERVICE_CONFIG_TEST_KEY"] == "value"


@pytest.mark.parametrize(("env", "expected"), [({"PORT": "8080"}, "8080"), ({"PORT": ""}, None), ({}, None)])
def test_lookup_value_treats_empty_as_unset(env: dict[str, str], expected) -> None:
    """빈 문자열과 없는 키는 모두 None으로 조회된다."""

    assert lookup_value(env, "PORT") == expected

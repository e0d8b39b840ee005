"""
목적: pytest 공통 픽스처와 로깅 훅을 제공한다.
설명: 필수 키만 채운 합성 환경과 인메모리 로거를 제공하고, 테스트 시작/종료와 결과를 로깅한다.
디자인 패턴: 테스트 훅
참조: pyproject.toml
"""

from __future__ import annotations

import logging

import pytest

from service_config.shared.logging import InMemoryLogger

_LOGGER = logging.getLogger("tests")

JWT_SECRET_VALUE = "s3cr3t-jwt-signing-key"


@pytest.fixture(autouse=True)
def _isolate_log_stdout(monkeypatch: pytest.MonkeyPatch) -> None:
    """개발자 셸의 LOG_STDOUT 값이 테스트 출력에 섞이지 않게 한다."""

    monkeypatch.delenv("LOG_STDOUT", raising=False)


@pytest.fixture
def required_env() -> dict[str, str]:
    """필수 키만 채운 합성 환경을 반환한다."""

    return {
        "DB_URL": "postgres://app:db-pass@db:5432/app",
        "JWT_SECRET": JWT_SECRET_VALUE,
    }


@pytest.fixture
def memory_logger() -> InMemoryLogger:
    """stdout 출력 없이 레코드만 보관하는 로거를 반환한다."""

    return InMemoryLogger(name="test", emit_stdout=False)


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)

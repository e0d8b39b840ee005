"""
목적: 서비스 시작 시 설정을 로드하는 진입점 헬퍼를 제공한다.
설명: 오버라이드 파일과 프로세스 환경 변수로 설정을 로드하고,
      치명 오류가 나면 로그와 stderr에 메시지를 남긴 뒤 종료 코드 1로 프로세스를 끝낸다.
디자인 패턴: 단일 책임 원칙(SRP)
참조: src/service_config/shared/config/loader.py, src/service_config/__main__.py
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Optional, Sequence, TextIO

from service_config.shared.config import (
    ConfigLoader,
    ConfigurationError,
    ConfigurationRecord,
    EnvironmentSource,
    OverrideFileLoader,
    TtlInputStyle,
)
from service_config.shared.logging import Logger, create_default_logger

EXIT_CONFIG_ERROR = 1


def build_environment(
    logger: Logger,
    base_dir: Optional[Path] = None,
    env_files: Optional[Sequence[str | Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> EnvironmentSource:
    """오버라이드 파일 위에 프로세스 환경 변수를 겹친 조회 소스를 만든다."""

    override_loader = OverrideFileLoader(logger=logger, base_dir=base_dir, filenames=env_files)
    return EnvironmentSource.from_process(environ=environ, override_loader=override_loader)


def load_or_exit(
    env: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
    ttl_style: TtlInputStyle = TtlInputStyle.DURATION,
    base_dir: Optional[Path] = None,
    env_files: Optional[Sequence[str | Path]] = None,
    export_overrides: bool = True,
    stderr: Optional[TextIO] = None,
) -> ConfigurationRecord:
    """설정을 로드하거나 프로세스를 종료한다.

    Args:
        env: 조회할 매핑. 없으면 프로세스 환경 변수와 오버라이드 파일을 사용한다.
        logger: 주입 가능한 로거.
        ttl_style: JWT TTL 입력 방식.
        base_dir: 오버라이드 파일 기준 디렉터리.
        env_files: 오버라이드 파일 목록. 없으면 `.env`, `.env.local`.
        export_overrides: env가 없을 때 파일에서만 정의된 키를 `os.environ`에 반영할지 여부.
        stderr: 치명 메시지 출력 대상.

    Raises:
        SystemExit: 필수 값 누락 또는 불변식 위반 시 종료 코드 1.
    """

    logger = logger or create_default_logger("bootstrap")
    if env is None:
        source = build_environment(logger, base_dir=base_dir, env_files=env_files)
        if export_overrides:
            source.export_to(os.environ)
        env = source

    try:
        return ConfigLoader(env=env, logger=logger, ttl_style=ttl_style).load()
    except ConfigurationError as error:
        logger.critical(error.message, metadata=error.detail.model_dump())
        print(f"❌ {error.message}", file=stderr or sys.stderr, flush=True)
        raise SystemExit(EXIT_CONFIG_ERROR) from error

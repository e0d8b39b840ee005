"""
목적: 설정 점검용 CLI를 제공한다.
설명: 오버라이드 파일과 환경 변수로 설정을 로드해 비밀 값이 빠진 요약을 JSON으로 출력한다.
      필수 값 누락이나 불변식 위반이면 stderr에 메시지를 남기고 종료 코드 1로 끝난다.
디자인 패턴: 스크립트 오케스트레이션
참조: src/service_config/bootstrap.py
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from service_config.bootstrap import load_or_exit
from service_config.shared.config import TtlInputStyle
from service_config.shared.logging import InMemoryLogger, LogLevel


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="service-config",
        description="환경 변수와 .env 파일로 서비스 설정을 로드하고 요약을 출력",
    )
    parser.add_argument(
        "--env-file",
        dest="env_files",
        action="append",
        default=None,
        help="오버라이드 파일 경로 (여러 번 지정 가능, 먼저 지정한 파일이 우선)",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="오버라이드 파일 기준 디렉터리 (기본값: 현재 디렉터리)",
    )
    parser.add_argument(
        "--ttl-style",
        choices=[style.value for style in TtlInputStyle],
        default=TtlInputStyle.DURATION.value,
        help="JWT TTL 입력 방식",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="DEBUG 이상 모든 로그를 stderr에 출력 (기본값: WARNING 이상만 출력)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logger = InMemoryLogger(
        name="service-config",
        emit_stdout=True,
        stream=sys.stderr,
        min_level=LogLevel.DEBUG if args.verbose else LogLevel.WARNING,
    )

    try:
        record = load_or_exit(
            logger=logger,
            ttl_style=TtlInputStyle(args.ttl_style),
            base_dir=args.base_dir,
            env_files=args.env_files,
            export_overrides=False,
        )
    except SystemExit as exit_error:
        return int(exit_error.code or 0)

    print(json.dumps(record.log_summary(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
목적: 환경 변수 문자열을 타입별 값으로 변환한다.
설명: 정수/불리언/기간 변환 규칙을 한 곳에 모은다. 실패 시 ValueError를 올리고,
      기본값 대체 여부는 호출자(ConfigLoader)가 결정한다.
디자인 패턴: 전략 패턴
참조: src/service_config/shared/config/loader.py, src/service_config/shared/config/duration.py
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Any, Callable, Dict

from service_config.shared.config.duration import parse_duration
from service_config.shared.config.schema import FieldKind

TRUE_TOKENS = frozenset({"true", "1", "yes", "on"})
FALSE_TOKENS = frozenset({"false", "0", "no", "off"})

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_int(raw: str) -> int:
    """10진 정수 문자열을 변환한다. 공백/밑줄/소수점은 허용하지 않는다."""

    if not _INTEGER_PATTERN.fullmatch(raw):
        raise ValueError(f"정수 형식이 아닙니다: {raw!r}")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"정수 범위를 벗어났습니다: {raw!r}")
    return value


def parse_bool(raw: str) -> bool:
    """대소문자를 구분하지 않고 허용된 토큰만 불리언으로 변환한다."""

    lowered = raw.lower()
    if lowered in TRUE_TOKENS:
        return True
    if lowered in FALSE_TOKENS:
        return False
    raise ValueError(f"불리언 토큰이 아닙니다: {raw!r}")


def parse_string(raw: str) -> str:
    return raw


_PARSERS: Dict[FieldKind, Callable[[str], Any]] = {
    FieldKind.STRING: parse_string,
    FieldKind.SECRET: parse_string,
    FieldKind.INTEGER: parse_int,
    FieldKind.BOOLEAN: parse_bool,
    FieldKind.DURATION: parse_duration,
}


def coerce(kind: FieldKind, raw: str) -> int | bool | str | timedelta:
    """필드 종류에 맞는 파서로 값을 변환한다.

    Raises:
        ValueError: 값이 해당 종류로 해석되지 않는 경우.
    """

    return _PARSERS[kind](raw)

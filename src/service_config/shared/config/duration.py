"""
목적: 기간(duration) 문자열 파싱/포맷 유틸리티를 제공한다.
설명: `15m`, `1h30m`, `1.5s`, `300ms`처럼 단위 접미사가 붙은 표현식을 timedelta로 변환하고,
      로그 출력용으로 `15m0s` 형태의 문자열을 다시 만든다.
디자인 패턴: 유틸리티 함수
참조: src/service_config/shared/config/coercion.py
"""

from __future__ import annotations

import re
from datetime import timedelta
from fractions import Fraction

_NANOSECOND = 1
_MICROSECOND = 1000 * _NANOSECOND
_MILLISECOND = 1000 * _MICROSECOND
_SECOND = 1000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_UNIT_NANOS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # micro sign
    "μs": _MICROSECOND,  # greek mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}

# 부호 있는 64비트 나노초 범위 (약 ±2562047h)
_MAX_NANOS = 2**63 - 1
_MIN_NANOS = -(2**63)

# "ms"가 "m"보다 먼저 시도되어야 한다.
_TERM_PATTERN = re.compile(r"([0-9]*)(?:\.([0-9]*))?(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """기간 표현식을 timedelta로 변환한다.

    Args:
        text: 부호(선택)와 `<숫자><단위>` 항의 연속. 단독 `"0"`도 허용한다.

    Returns:
        변환된 timedelta. 마이크로초 미만은 0 방향으로 버린다.

    Raises:
        ValueError: 형식이 올바르지 않거나 64비트 나노초 범위를 벗어난 경우.
    """

    if not text:
        raise ValueError("빈 기간 문자열입니다.")

    body = text
    negative = False
    if body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]
    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"잘못된 기간 문자열입니다: {text!r}")

    total_nanos = Fraction(0)
    position = 0
    while position < len(body):
        match = _TERM_PATTERN.match(body, position)
        if match is None:
            raise ValueError(f"잘못된 기간 문자열입니다: {text!r}")
        whole, fraction, unit = match.group(1), match.group(2) or "", match.group(3)
        if not whole and not fraction:
            raise ValueError(f"잘못된 기간 문자열입니다: {text!r}")
        amount = Fraction(int(whole or "0"))
        if fraction:
            amount += Fraction(int(fraction), 10 ** len(fraction))
        total_nanos += amount * _UNIT_NANOS[unit]
        position = match.end()

    if negative:
        total_nanos = -total_nanos
    if not _MIN_NANOS <= total_nanos <= _MAX_NANOS:
        raise ValueError(f"기간 값이 너무 큽니다: {text!r}")
    return timedelta(microseconds=int(total_nanos / _MICROSECOND))


def format_duration(value: timedelta) -> str:
    """timedelta를 `168h0m0s`, `1.5s`, `250ms` 형태의 문자열로 변환한다."""

    total_micros = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    if total_micros == 0:
        return "0s"

    sign = "-" if total_micros < 0 else ""
    micros = abs(total_micros)
    if micros < 1000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_format_fraction(micros, 1000)}ms"

    hours, remainder = divmod(micros, 3600 * 1_000_000)
    minutes, remainder = divmod(remainder, 60 * 1_000_000)
    parts = [sign]
    if hours:
        parts.append(f"{hours}h")
    if hours or minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{_format_fraction(remainder, 1_000_000)}s")
    return "".join(parts)


def _format_fraction(value: int, unit: int) -> str:
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    width = len(str(unit)) - 1
    digits = str(fraction).rjust(width, "0").rstrip("0")
    return f"{whole}.{digits}"

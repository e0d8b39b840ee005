"""
목적: 서비스 설정 로더를 제공한다.
설명: 필수 값 확인 → 선택 값 타입 변환(실패 시 경고 후 기본값) → 교차 필드 검증 →
      비밀 값을 뺀 구조화 로그 기록 순서로 ConfigurationRecord를 만든다.
      치명 오류는 예외로 올리고, 프로세스 종료 여부는 진입점이 결정한다.
디자인 패턴: 빌더 패턴
참조: src/service_config/shared/config/schema.py, src/service_config/shared/config/validation.py,
      src/service_config/bootstrap.py
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Dict, Iterable, List, Optional

from service_config.shared.config.coercion import coerce, parse_int
from service_config.shared.config.duration import format_duration
from service_config.shared.config.env_source import EnvironmentSource, lookup_value
from service_config.shared.config.errors import InvalidOptionalValue, MissingRequiredVariableError
from service_config.shared.config.models import ConfigurationRecord
from service_config.shared.config.schema import (
    ENV_FIELDS,
    REQUIRED_FIELDS,
    UNIT_COUNT_TTL_FIELDS,
    EnvField,
    TtlInputStyle,
    ttl_keys_for,
)
from service_config.shared.config.validation import (
    DEFAULT_INVARIANTS,
    CrossFieldInvariant,
    validate_invariants,
)
from service_config.shared.logging import LogContext, Logger, create_default_logger


class ConfigLoader:
    """설정 로더 구현체이다.

    Args:
        env: 조회할 키-값 매핑. 없으면 프로세스 환경 변수와 오버라이드 파일을 사용한다.
        logger: 주입 가능한 로거.
        ttl_style: JWT TTL 입력 방식.
        invariants: 검사할 교차 필드 불변식 목록.
    """

    def __init__(
        self,
        env: Optional[Mapping[str, str]] = None,
        logger: Optional[Logger] = None,
        ttl_style: TtlInputStyle = TtlInputStyle.DURATION,
        invariants: Iterable[CrossFieldInvariant] = DEFAULT_INVARIANTS,
    ) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        if env is None:
            env = EnvironmentSource.from_process(logger=self._logger)
        self._env = env
        self._ttl_style = TtlInputStyle(ttl_style)
        self._invariants = tuple(invariants)
        self._warnings: List[InvalidOptionalValue] = []

    @property
    def ttl_style(self) -> TtlInputStyle:
        return self._ttl_style

    @property
    def warnings(self) -> List[InvalidOptionalValue]:
        """마지막 load() 중 기록된 선택 값 해석 실패 목록을 반환한다."""

        return list(self._warnings)

    def load(self) -> ConfigurationRecord:
        """설정을 해석해 불변 레코드를 반환한다.

        Raises:
            MissingRequiredVariableError: 필수 키가 없거나 비어 있는 경우.
            InvalidCrossFieldInvariantError: 교차 필드 불변식이 깨진 경우.
        """

        self._warnings = []
        self._ensure_required()

        values: Dict[str, Any] = {}
        for field in ENV_FIELDS:
            if field.ttl_style is not None and field.ttl_style is not self._ttl_style:
                continue
            raw = self._lookup(field.key)
            if raw is None:
                continue
            if field.required:
                values[field.attr] = raw
                continue
            resolved = self._resolve_optional(field, raw)
            if resolved is not None:
                values[field.attr] = resolved

        if self._ttl_style is TtlInputStyle.UNIT_COUNT:
            values.update(self._resolve_unit_count_ttls())
        self._warn_ignored_ttl_keys()

        record = ConfigurationRecord(**values)
        validate_invariants(record, self._invariants)
        self._logger.info(
            "configuration loaded",
            LogContext(component="ConfigLoader", tags={"ttl_style": self._ttl_style.value}),
            metadata=record.log_summary(),
        )
        return record

    def _lookup(self, key: str) -> Optional[str]:
        return lookup_value(self._env, key)

    def _ensure_required(self) -> None:
        missing = [field.key for field in REQUIRED_FIELDS if self._lookup(field.key) is None]
        if missing:
            raise MissingRequiredVariableError(missing)

    def _resolve_optional(self, field: EnvField, raw: str) -> Any:
        try:
            return coerce(field.kind, raw)
        except ValueError as error:
            self._record_invalid(field.key, raw, _default_label(field.attr), error)
            return None

    def _resolve_unit_count_ttls(self) -> Dict[str, timedelta]:
        resolved: Dict[str, timedelta] = {}
        for field in UNIT_COUNT_TTL_FIELDS:
            resolved[field.attr] = field.unit * field.default_count
            raw = self._lookup(field.key)
            if raw is None:
                continue
            try:
                resolved[field.attr] = field.unit * parse_int(raw)
            except (ValueError, OverflowError) as error:
                self._record_invalid(field.key, raw, str(field.default_count), error)
        return resolved

    def _warn_ignored_ttl_keys(self) -> None:
        other_style = next(style for style in TtlInputStyle if style is not self._ttl_style)
        ignored = [key for key in ttl_keys_for(other_style) if self._lookup(key) is not None]
        if not ignored:
            return
        self._logger.warning(
            f"TTL 입력 방식이 {self._ttl_style.value}이므로 다음 키를 무시합니다: {', '.join(ignored)}",
            LogContext(component="ConfigLoader", tags={"ttl_style": self._ttl_style.value}),
            metadata={"ignored_keys": ignored},
        )

    def _record_invalid(self, key: str, raw: str, default: str, error: Exception) -> None:
        warning = InvalidOptionalValue(key=key, value=raw, default=default, reason=str(error))
        self._warnings.append(warning)
        self._logger.warning(
            f"잘못된 값 {key}={raw}, 기본값 {default}을 사용합니다.",
            LogContext(component="ConfigLoader", source=key),
            metadata=warning.to_metadata(),
        )


def _default_label(attr: str) -> str:
    default = ConfigurationRecord.model_fields[attr].default
    if isinstance(default, timedelta):
        return format_duration(default)
    if isinstance(default, bool):
        return str(default).lower()
    return str(default)


def load_config(
    env: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
    ttl_style: TtlInputStyle = TtlInputStyle.DURATION,
) -> ConfigurationRecord:
    """ConfigLoader를 한 번 실행하는 편의 함수이다."""

    return ConfigLoader(env=env, logger=logger, ttl_style=ttl_style).load()

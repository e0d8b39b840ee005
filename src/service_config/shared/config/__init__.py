"""
목적: 설정 로더 공개 API를 제공한다.
설명: 설정 로더, 레코드 모델, 조회 소스, 오버라이드 파일 로더, 오류 타입을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/service_config/shared/config/loader.py, src/service_config/shared/config/models.py
"""

from service_config.shared.config.duration import format_duration, parse_duration
from service_config.shared.config.env_source import EnvironmentSource
from service_config.shared.config.errors import (
    ConfigurationError,
    InvalidCrossFieldInvariantError,
    InvalidOptionalValue,
    MissingRequiredVariableError,
)
from service_config.shared.config.loader import ConfigLoader, load_config
from service_config.shared.config.models import ConfigurationRecord
from service_config.shared.config.override_files import OverrideFileLoader
from service_config.shared.config.schema import TtlInputStyle

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "ConfigurationRecord",
    "EnvironmentSource",
    "InvalidCrossFieldInvariantError",
    "InvalidOptionalValue",
    "MissingRequiredVariableError",
    "OverrideFileLoader",
    "TtlInputStyle",
    "format_duration",
    "load_config",
    "parse_duration",
]

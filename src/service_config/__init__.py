"""
목적: service_config 패키지 공개 API를 제공한다.
설명: 서비스 시작 시 사용할 설정 로더와 진입점 헬퍼를 노출한다.
디자인 패턴: 퍼사드
참조: src/service_config/shared/config/__init__.py, src/service_config/bootstrap.py
"""

from service_config.bootstrap import load_or_exit
from service_config.shared.config import (
    ConfigLoader,
    ConfigurationError,
    ConfigurationRecord,
    EnvironmentSource,
    InvalidCrossFieldInvariantError,
    MissingRequiredVariableError,
    OverrideFileLoader,
    TtlInputStyle,
    load_config,
)

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "ConfigurationRecord",
    "EnvironmentSource",
    "InvalidCrossFieldInvariantError",
    "MissingRequiredVariableError",
    "OverrideFileLoader",
    "TtlInputStyle",
    "load_config",
    "load_or_exit",
]

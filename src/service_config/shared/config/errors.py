"""
목적: 설정 로딩 오류 타입을 정의한다.
설명: 필수 값 누락과 교차 필드 불변식 위반은 치명 오류로 예외를 올리고,
      선택 값 해석 실패는 경고 모델로만 기록한다.
디자인 패턴: 도메인 예외 객체
참조: src/service_config/shared/exceptions/base.py, src/service_config/shared/config/loader.py
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

from pydantic import BaseModel, ConfigDict

from service_config.shared.exceptions import BaseAppException, ExceptionDetail

MISSING_REQUIRED_CODE = "CONFIG_MISSING_REQUIRED"
INVALID_INVARIANT_CODE = "CONFIG_INVALID_INVARIANT"
INVALID_OPTIONAL_VALUE_CODE = "CONFIG_INVALID_OPTIONAL_VALUE"


class ConfigurationError(BaseAppException):
    """설정 로딩을 중단시키는 치명 오류의 공통 부모 클래스이다."""


class MissingRequiredVariableError(ConfigurationError):
    """필수 환경 변수가 없거나 비어 있을 때 발생한다.

    Args:
        keys: 누락된 키 목록. 첫 번째 키가 메시지에 표시된다.
    """

    def __init__(self, keys: Sequence[str]) -> None:
        if not keys:
            raise ValueError("keys는 비어 있을 수 없습니다.")
        self._keys = tuple(keys)
        detail = ExceptionDetail(
            code=MISSING_REQUIRED_CODE,
            cause=f"필수 환경 변수 누락: {', '.join(self._keys)}",
            hint="환경 변수 또는 .env 파일에 값을 설정하세요.",
            metadata={"keys": list(self._keys)},
        )
        super().__init__(f"필수 환경 변수가 설정되지 않았습니다: {self._keys[0]}", detail)

    @property
    def key(self) -> str:
        """첫 번째 누락 키를 반환한다."""

        return self._keys[0]

    @property
    def keys(self) -> tuple[str, ...]:
        return self._keys


class InvalidCrossFieldInvariantError(ConfigurationError):
    """교차 필드 불변식이 깨졌을 때 발생한다.

    Args:
        invariant: 불변식 이름.
        description: 사람이 읽을 수 있는 불변식 설명.
        values: 위반에 관련된 필드 값(로그 친화 문자열).
    """

    def __init__(self, invariant: str, description: str, values: Dict[str, Any]) -> None:
        self._invariant = invariant
        self._values = dict(values)
        rendered = ", ".join(f"{name}={value}" for name, value in self._values.items())
        detail = ExceptionDetail(
            code=INVALID_INVARIANT_CODE,
            cause=description,
            metadata={"invariant": invariant, "values": self._values},
        )
        super().__init__(f"설정 불변식 위반({invariant}): {description} [{rendered}]", detail)

    @property
    def invariant(self) -> str:
        return self._invariant

    @property
    def values(self) -> Dict[str, Any]:
        return dict(self._values)


class InvalidOptionalValue(BaseModel):
    """선택 환경 변수 해석 실패 기록이다. 로딩은 기본값으로 계속된다.

    Args:
        key: 환경 변수 키.
        value: 해석에 실패한 원본 값.
        default: 대신 사용한 기본값(로그 친화 문자열).
        reason: 해석 실패 사유.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: str
    default: str
    reason: str

    def to_metadata(self) -> Dict[str, Any]:
        """경고 로그 메타데이터로 변환한다."""

        return {"code": INVALID_OPTIONAL_VALUE_CODE, **self.model_dump()}

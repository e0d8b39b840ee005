"""
목적: 공통 예외 모델을 정의한다.
설명: 에러 코드/원인/힌트/메타데이터를 포함하는 불변 Pydantic 모델을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/service_config/shared/exceptions/base.py, src/service_config/shared/config/errors.py
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExceptionDetail(BaseModel):
    """예외 상세 정보를 담는 모델이다.

    Args:
        code: 설정 오류 분류 코드(예: `CONFIG_MISSING_REQUIRED`).
        cause: 에러의 직접 원인 설명.
        hint: 운영자가 조치할 수 있는 힌트.
        metadata: 키 이름, 불변식 이름 등 구조화 메타데이터. 비밀 값은 넣지 않는다.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="오류 분류 코드")
    cause: Optional[str] = Field(default=None, description="직접 원인")
    hint: Optional[str] = Field(default=None, description="운영자 조치 힌트")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="구조화 메타데이터")

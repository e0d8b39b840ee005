"""
목적: 설정 로더가 읽는 키-값 조회 소스를 제공한다.
설명: 로더는 전역 환경 변수 대신 주입된 매핑을 읽는다. 기본 소스는 프로세스 환경 변수를
      오버라이드 파일 값 위에 겹친 것이며, 프로세스 환경 변수가 항상 우선한다.
디자인 패턴: 어댑터 패턴
참조: src/service_config/shared/config/override_files.py, src/service_config/shared/config/loader.py
"""

from __future__ import annotations

import os
from collections.abc import Mapping, MutableMapping
from typing import Iterator, List, Optional

from service_config.shared.config.override_files import OverrideFileLoader
from service_config.shared.logging import Logger


class EnvironmentSource(Mapping[str, str]):
    """읽기 전용 환경 변수 매핑이다.

    Args:
        values: 키-값 매핑. 생성 시점에 복사되어 이후 원본 변경의 영향을 받지 않는다.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values = dict(values or {})

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @classmethod
    def from_process(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        override_loader: Optional[OverrideFileLoader] = None,
        logger: Optional[Logger] = None,
    ) -> "EnvironmentSource":
        """프로세스 환경 변수와 오버라이드 파일을 합친 소스를 만든다.

        Args:
            environ: 기준 환경 변수. 없으면 `os.environ`을 사용한다.
            override_loader: 오버라이드 파일 로더. 없으면 기본 파일 목록을 사용한다.
            logger: 기본 오버라이드 로더에 주입할 로거.
        """

        base = dict(os.environ if environ is None else environ)
        loader = override_loader or OverrideFileLoader(logger=logger)
        # 이미 정의된 키는 값이 빈 문자열이어도 파일 값으로 덮어쓰지 않는다.
        merged = {**loader.read(), **base}
        return cls(merged)

    def export_to(self, environ: MutableMapping[str, str]) -> List[str]:
        """대상 환경에 없는 키만 복사하고, 복사한 키 목록을 반환한다."""

        exported: List[str] = []
        for key, value in self._values.items():
            if key in environ:
                continue
            environ[key] = value
            exported.append(key)
        return exported


def lookup_value(env: Mapping[str, str], key: str) -> Optional[str]:
    """키 값을 반환한다. 없거나 빈 문자열이면 None이다."""

    value = env.get(key)
    return value if value else None

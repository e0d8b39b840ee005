"""
목적: 로컬 오버라이드 `.env` 파일 로딩을 제공한다.
설명: `.env`, `.env.local`을 순서대로 읽어 먼저 정의된 키를 우선하는 사전을 만든다.
      파일이 없거나 읽을 수 없으면 경고만 남기고 건너뛰며, 로딩을 중단시키지 않는다.
디자인 패턴: 전략 패턴
참조: src/service_config/shared/config/env_source.py, src/service_config/shared/const/__init__.py
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Sequence

from dotenv import dotenv_values

from service_config.shared.const import SharedConst
from service_config.shared.logging import LogContext, Logger, create_default_logger


class OverrideFileLoader:
    """로컬 오버라이드 파일 로더이다.

    동작 순서:
    1. `base_dir` 기준으로 `filenames`를 우선순위 순서대로 확인한다.
    2. 존재하는 파일은 python-dotenv로 파싱한다.
    3. 같은 키가 여러 파일에 있으면 먼저 읽은 파일의 값을 유지한다.
    4. 값 없이 키만 적힌 줄(`KEY`)은 무시한다.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        base_dir: Optional[Path] = None,
        filenames: Optional[Sequence[str | Path]] = None,
        encoding: Optional[str] = None,
    ) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self._filenames = tuple(filenames or SharedConst.DEFAULT_OVERRIDE_FILES)
        self._encoding = encoding or SharedConst.DEFAULT_ENCODING
        self._logger = logger or create_default_logger("OverrideFileLoader")

    @property
    def base_dir(self) -> Path:
        """상대 경로 해석 기준 디렉터리를 반환한다."""

        return self._base_dir

    @property
    def paths(self) -> tuple[Path, ...]:
        """우선순위 순서의 파일 경로를 반환한다."""

        return tuple(self._base_dir / name for name in self._filenames)

    def read(self) -> Dict[str, str]:
        """모든 오버라이드 파일을 병합해 반환한다."""

        merged: Dict[str, str] = {}
        for path in self.paths:
            for key, value in self._read_file(path).items():
                if value is None:
                    continue
                merged.setdefault(key, value)
        return merged

    def _read_file(self, path: Path) -> Dict[str, Optional[str]]:
        context = LogContext(component="OverrideFileLoader", source=str(path))
        if not path.exists():
            self._logger.debug(f"오버라이드 파일이 없어 건너뜁니다: {path}", context)
            return {}
        if not path.is_file():
            self._logger.warning(f"오버라이드 경로가 파일이 아니어서 건너뜁니다: {path}", context)
            return {}
        try:
            values = dotenv_values(dotenv_path=path, encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as error:
            self._logger.warning(
                f"오버라이드 파일을 읽지 못해 건너뜁니다: {path}",
                context,
                metadata={"error": repr(error)},
            )
            return {}
        self._logger.debug(f"오버라이드 파일 로드 완료: {path} (keys={len(values)})", context)
        return dict(values)

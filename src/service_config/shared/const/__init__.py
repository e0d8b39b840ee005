"""
목적: 공통 상수 집합을 제공한다.
설명: 설정 로더 전역에서 사용하는 기본 상수 값을 정의한다.
디자인 패턴: 상수 객체
참조: src/service_config/shared/config/override_files.py, src/service_config/shared/config/loader.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일 인코딩.
        DEFAULT_OVERRIDE_FILES: 우선순위 순서의 로컬 오버라이드 파일 이름.
        LOG_STDOUT_ENV_KEY: 로그 stdout 출력 여부를 결정하는 환경 변수 키.
    """

    DEFAULT_ENCODING = "utf-8"
    DEFAULT_OVERRIDE_FILES = (".env", ".env.local")
    LOG_STDOUT_ENV_KEY = "LOG_STDOUT"


__all__ = ["SharedConst"]

"""
목적: 공통 모듈 패키지를 정의한다.
설명: 설정/로깅/예외/상수 하위 모듈을 묶는다.
디자인 패턴: 패키지
참조: src/service_config/shared/config/__init__.py
"""

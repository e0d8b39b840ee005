"""
목적: 로컬 오버라이드 파일 로더 동작을 검증한다.
설명: 파일 간 우선순위, 누락/손상 파일 건너뛰기, 값 없는 키 무시를 확인한다.
디자인 패턴: 단위 테스트
참조: src/service_config/shared/config/override_files.py
"""

from __future__ import annotations

from service_config.shared.config import OverrideFileLoader
from service_config.shared.logging import InMemoryLogger, LogLevel


def test_first_defined_file_wins(tmp_path, memory_logger: InMemoryLogger) -> None:
    """같은 키는 먼저 읽은 `.env` 값이 유지된다."""

    (tmp_path / ".env").write_text("PORT=9000\nJWT_ISSUER=from-env\n", encoding="utf-8")
    (tmp_path / ".env.local").write_text("PORT=9100\nREDIS_ADDR=cache:6380\n", encoding="utf-8")

    values = OverrideFileLoader(logger=memory_logger, base_dir=tmp_path).read()

    assert values == {"PORT": "9000", "JWT_ISSUER": "from-env", "REDIS_ADDR": "cache:6380"}


def test_missing_files_are_skipped(tmp_path, memory_logger: InMemoryLogger) -> None:
    """파일이 하나도 없으면 빈 사전을 반환하고 경고 없이 진행한다."""

    values = OverrideFileLoader(logger=memory_logger, base_dir=tmp_path).read()

    assert values == {}
    levels = {record.level for record in memory_logger.repository.list()}
    assert LogLevel.WARNING not in levels


def test_directory_in_place_of_file_is_skipped(tmp_path, memory_logger: InMemoryLogger) -> None:
    """파일 자리에 디렉터리가 있으면 경고 후 다음 파일로 넘어간다."""

    (tmp_path / ".env").mkdir()
    (tmp_path / ".env.local").write_text("PORT=9100\n", encoding="utf-8")

    values = OverrideFileLoader(logger=memory_logger, base_dir=tmp_path).read()

    assert values == {"PORT": "9100"}
    warnings = [r for r in memory_logger.repository.list() if r.level == LogLevel.WARNING]
    assert len(warnings) == 1
    assert warnings[0].context is not None
    assert warnings[0].context.source == str(tmp_path / ".env")


def test_undecodable_file_is_skipped(tmp_path, memory_logger: InMemoryLogger) -> None:
    """인코딩이 깨진 파일은 로딩을 중단시키지 않는다."""

    (tmp_path / ".env").write_bytes(b"PORT=\xff\xfe\xfa\n")
    (tmp_path / ".env.local").write_text("REDIS_DB=2\n", encoding="utf-8")

    values = OverrideFileLoader(logger=memory_logger, base_dir=tmp_path).read()

    assert values == {"REDIS_DB": "2"}


def test_malformed_lines_and_bare_keys_are_ignored(tmp_path, memory_logger: InMemoryLogger) -> None:
    """파싱되지 않는 줄과 값 없는 키는 무시되고 나머지 값은 유지된다."""

    (tmp_path / ".env").write_text(
        "# comment\nBARE_KEY\nPORT=9000\nexport KAFKA_ADDR=broker:9092\nQUOTED=\"with spaces\"\n",
        encoding="utf-8",
    )

    values = OverrideFileLoader(logger=memory_logger, base_dir=tmp_path).read()

    assert values["PORT"] == "9000"
    assert values["KAFKA_ADDR"] == "broker:9092"
    assert values["QUOTED"] == "with spaces"
    assert "BARE_KEY" not in values


def test_custom_filenames_respect_given_order(tmp_path, memory_logger: InMemoryLogger) -> None:
    """직접 지정한 파일 목록도 앞선 파일이 우선한다."""

    (tmp_path / "a.env").write_text("PORT=1\n", encoding="utf-8")
    (tmp_path / "b.env").write_text("PORT=2\nDEV_PORT=3\n", encoding="utf-8")

    loader = OverrideFileLoader(logger=memory_logger, base_dir=tmp_path, filenames=["b.env", "a.env"])

    assert loader.read() == {"PORT": "2", "DEV_PORT": "3"}
    assert loader.paths == (tmp_path / "b.env", tmp_path / "a.env")

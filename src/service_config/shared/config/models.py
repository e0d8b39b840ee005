"""
목적: 서비스 설정 레코드 모델을 정의한다.
설명: 프로세스 시작 시 한 번 만들어지고 이후 변경되지 않는 평면 설정 레코드이다.
      비밀 값은 SecretStr로 보관해 repr/str에 노출되지 않으며,
      로그 요약은 허용 목록에 있는 비밀이 아닌 필드만 담는다.
디자인 패턴: 데이터 전송 객체(DTO), 불변 객체
참조: src/service_config/shared/config/schema.py, src/service_config/shared/config/loader.py
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator

from service_config.shared.config.duration import format_duration


class ConfigurationRecord(BaseModel):
    """해석이 끝난 서비스 설정 레코드이다.

    필드 기본값은 환경 변수가 없거나 해석에 실패했을 때 사용된다.
    `dev_postgres_dsn`, `wish_postgres_dsn`은 비어 있으면 `db_url` 값을 따른다.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Database
    db_url: str = Field(..., min_length=1)
    dev_postgres_dsn: str = ""
    wish_postgres_dsn: str = ""
    db_max_open_conns: int = 10
    db_max_idle_conns: int = 5
    db_conn_max_lifetime: timedelta = timedelta(minutes=30)
    db_conn_max_idle_time: timedelta = timedelta(minutes=5)

    # Server
    port: str = "8080"
    dev_port: str = "8083"
    wish_port: str = "8082"
    read_timeout: timedelta = timedelta(seconds=10)
    write_timeout: timedelta = timedelta(seconds=10)
    idle_timeout: timedelta = timedelta(seconds=30)
    shutdown_timeout: timedelta = timedelta(seconds=5)

    # JWT
    jwt_secret: SecretStr
    jwt_ttl: timedelta = timedelta(minutes=15)
    jwt_refresh_ttl: timedelta = timedelta(days=7)
    jwt_issuer: str = "vira-api"

    # Redis
    redis_addr: str = "redis:6379"
    redis_db: int = 0
    redis_password: SecretStr = SecretStr("")
    redis_pool_size: int = 10

    # Kafka
    kafka_addr: str = "redpanda:9092"
    kafka_consumer_group: str = "vira-api-group"

    # External services
    vira_id_endpoint: str = ""

    # Feature flags
    enable_debug: bool = False
    enable_swagger: bool = False

    # Logging
    log_level: str = "info"
    log_format: str = "json"

    @model_validator(mode="before")
    @classmethod
    def _fill_dsn_fallbacks(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        filled = dict(data)
        for attr in ("dev_postgres_dsn", "wish_postgres_dsn"):
            if not filled.get(attr):
                filled[attr] = filled.get("db_url", "")
        return filled

    def log_summary(self) -> Dict[str, Dict[str, Any]]:
        """로그에 남길 비밀이 아닌 설정 요약을 반환한다.

        DSN은 자격 증명을 포함하므로 제외한다. 기간 값은 `15m0s` 형태로 변환한다.
        """

        return {
            "server": {
                "port": self.port,
                "dev_port": self.dev_port,
                "wish_port": self.wish_port,
            },
            "timeouts": {
                "read": format_duration(self.read_timeout),
                "write": format_duration(self.write_timeout),
                "idle": format_duration(self.idle_timeout),
                "shutdown": format_duration(self.shutdown_timeout),
            },
            "jwt": {
                "ttl": format_duration(self.jwt_ttl),
                "refresh_ttl": format_duration(self.jwt_refresh_ttl),
                "issuer": self.jwt_issuer,
            },
            "redis": {
                "addr": self.redis_addr,
                "db": self.redis_db,
                "pool_size": self.redis_pool_size,
            },
            "kafka": {
                "addr": self.kafka_addr,
                "consumer_group": self.kafka_consumer_group,
            },
            "db": {
                "max_open_conns": self.db_max_open_conns,
                "max_idle_conns": self.db_max_idle_conns,
                "conn_max_lifetime": format_duration(self.db_conn_max_lifetime),
                "conn_max_idle_time": format_duration(self.db_conn_max_idle_time),
            },
            "features": {
                "enable_debug": self.enable_debug,
                "enable_swagger": self.enable_swagger,
            },
            "logging": {
                "level": self.log_level,
                "format": self.log_format,
            },
        }

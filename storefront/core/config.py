"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 .env 파일 또는 환경 변수에서 설정을 로드합니다.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """스토어프론트 설정 클래스"""

    # 데이터베이스 설정
    database_url: str = "sqlite:///./storefront.db"

    # Redis 설정 (체크아웃 중 재고 락 전용)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: str = ""

    # JWT 설정
    jwt_secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = 60

    # 락 설정
    lock_timeout_seconds: int = 10
    lock_retry_attempts: int = 3
    lock_retry_delay_ms: int = 100

    # 가격 설정
    tax_rate: float = 0.15

    # AI 상품 검색용 chat-completion API 설정
    llm_api_key: str = ""
    llm_base_url: str = "https://api.openai.com/v1"
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.3
    llm_max_tokens: int = 500
    llm_timeout_seconds: float = 30.0

    # 애플리케이션 설정
    cors_origins: str = "*"  # 쉼표로 구분된 origin 목록
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def redis_url(self) -> str:
        """
        Redis 연결 URL 생성

        비밀번호가 있는 경우: redis://:password@host:port/db
        비밀번호가 없는 경우: redis://host:port/db
        """
        if self.redis_password:
            return f"redis://:{self.redis_password}@{self.redis_host}:{self.redis_port}/{self.redis_db}"
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

    @property
    def cors_origin_list(self) -> list[str]:
        """
        허용된 CORS origin 목록 파싱

        Returns:
            ["*"] or ["http://localhost:3000", "https://shop.example.com", ...]
        """
        if self.cors_origins.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수
    """
    return Settings()

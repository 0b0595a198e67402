"""
SQLAlchemy 데이터베이스 설정

엔진, 세션 팩토리, Base 클래스를 정의합니다.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from storefront.core.config import get_settings

settings = get_settings()


def _engine_options(database_url: str) -> dict:
    """설정된 DB 종류에 맞는 connection 옵션"""
    if database_url.startswith("sqlite"):
        # SQLite 사용 시 check_same_thread 비활성화 (FastAPI 워커 스레드 공유)
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 30,
        "pool_pre_ping": True,  # connection 유효성 자동 체크
        "pool_recycle": 3600,  # 1시간마다 connection 재생성
    }


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db() -> None:
    """아직 없는 테이블을 모두 생성합니다."""
    # 모델을 import해야 Base에 테이블이 등록됨
    import storefront.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db():
    """
    FastAPI 의존성 주입용 데이터베이스 세션 제너레이터

    사용 예:
        @app.get("/items/")
        def read_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

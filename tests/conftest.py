"""
pytest 픽스처 정의
"""

import os

# 앱 엔진은 import 시점에 생성되므로 작업 디렉토리 밖을 사용
os.environ.setdefault("DATABASE_URL", "sqlite://")

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient
from redis import Redis
from redis.exceptions import RedisError
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.api.deps import get_llm_transport
from storefront.core.config import Settings, get_settings
from storefront.core.security import create_access_token
from storefront.db.database import Base, get_db
from storefront.db.redis_client import create_redis_client, get_redis_client
from storefront.main import app
from storefront.models import Category, Product, Profile
from storefront.models.profile import ROLE_ADMIN, ROLE_CUSTOMER, ROLE_SELLER
from storefront.services.auth_service import AuthService


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처"""
    return Settings(
        database_url="sqlite://",
        redis_host="localhost",
        redis_port=6379,
        redis_db=1,  # 기본 DB와 분리
        redis_password="",
        jwt_secret_key="test-secret-key-for-testing",
        jwt_algorithm="HS256",
        jwt_expiration_minutes=30,
        lock_timeout_seconds=10,
        lock_retry_attempts=3,
        lock_retry_delay_ms=10,
        tax_rate=0.15,
        llm_api_key="test-llm-key",
        llm_base_url="https://llm.test/v1",
        llm_model="gpt-4o-mini",
    )


@pytest.fixture(scope="function")
def test_db() -> Session:
    """
    인메모리 SQLite 세션 픽스처

    StaticPool로 연결을 하나만 유지해 TestClient 워커 스레드도
    테스트 본문과 같은 DB를 봅니다.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def fake_redis():
    """락이 항상 비어 있는 Redis 대체 객체"""
    client = MagicMock(spec=Redis)
    client.set.return_value = True
    client.eval.return_value = 1
    return client


@pytest.fixture(scope="function")
def redis_client(settings):
    """
    테스트 DB에 연결한 실제 Redis 클라이언트

    Redis 서버에 연결할 수 없으면 테스트를 skip합니다.
    """
    client = create_redis_client(settings)
    try:
        client.ping()
    except RedisError:
        client.close()
        pytest.skip("Redis server not available")

    client.flushdb()
    yield client
    client.flushdb()
    client.close()


@pytest.fixture(scope="function")
def llm_transport():
    """
    교체 가능한 chat-completion transport

    테스트에서 `llm_transport.handler`를 지정해 모델 응답을 정합니다.
    """
    holder = SimpleNamespace(handler=None, requests=[])

    def dispatch(request):
        holder.requests.append(request)
        if holder.handler is None:
            return httpx.Response(500, json={"error": "no handler"})
        return holder.handler(request)

    holder.transport = httpx.MockTransport(dispatch)
    return holder


@pytest.fixture(scope="function")
def test_client(test_db, fake_redis, settings, llm_transport):
    """테스트 DB, 가짜 Redis, 테스트 설정, 가짜 LLM을 연결한 TestClient"""

    def override_get_db():
        try:
            yield test_db
        except Exception:
            test_db.rollback()
            raise

    def override_get_redis_client():
        yield fake_redis

    def override_get_settings():
        return settings

    def override_get_llm_transport():
        return llm_transport.transport

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis_client] = override_get_redis_client
    app.dependency_overrides[get_settings] = override_get_settings
    app.dependency_overrides[get_llm_transport] = override_get_llm_transport

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(test_db):
    """프로필 생성 팩토리: make_user(role="seller", email=...)"""
    counter = {"n": 0}

    def _make_user(role: str = ROLE_CUSTOMER, name: str = None, email: str = None) -> Profile:
        counter["n"] += 1
        email = email or f"{role}{counter['n']}@example.com"
        return AuthService.register_user(
            name=name or f"{role.title()} {counter['n']}",
            email=email,
            password="password123",
            db=test_db,
            role=role,
        )

    return _make_user


@pytest.fixture
def customer(make_user) -> Profile:
    return make_user(ROLE_CUSTOMER, name="Chipo Moyo", email="chipo@example.com")


@pytest.fixture
def seller(make_user) -> Profile:
    return make_user(ROLE_SELLER, name="Tendai Crafts", email="tendai@example.com")


@pytest.fixture
def admin(make_user) -> Profile:
    return make_user(ROLE_ADMIN, name="Store Admin", email="admin@example.com")


@pytest.fixture
def auth_headers(settings):
    """프로필의 Bearer 인증 헤더 생성: auth_headers(user)"""

    def _auth_headers(user: Profile) -> dict:
        token = create_access_token({"sub": user.email, "user_id": user.id}, settings)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def categories(test_db) -> dict:
    """이름으로 접근하는 Art, Jewelry 카테고리"""
    art = Category(name="Art", description="Sculpture and wall art")
    jewelry = Category(name="Jewelry", description="Beaded pieces")
    test_db.add_all([art, jewelry])
    test_db.commit()
    return {"Art": art, "Jewelry": jewelry}


@pytest.fixture
def make_product(test_db, seller):
    """상품 생성 팩토리 (owner를 주지 않으면 `seller` 소유)"""

    def _make_product(
        name: str = "Zimbabwe Basket",
        price: float = 59.99,
        stock: int = 10,
        category: Category = None,
        owner: Profile = None,
        description: str = None,
    ) -> Product:
        product = Product(
            name=name,
            description=description,
            price=price,
            stock=stock,
            category_id=category.id if category else None,
            seller_id=(owner or seller).id,
        )
        test_db.add(product)
        test_db.commit()
        test_db.refresh(product)
        return product

    return _make_product

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.routes import admin, auth, cart, orders, products, reviews, search, seller
from storefront.core.config import get_settings
from storefront.core.logging import configure_logging
from storefront.db.database import init_db

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)
    init_db()
    logger.info("Sammy's Market API started (env=%s)", settings.app_env)
    yield


app = FastAPI(
    title="Sammy's Market API",
    description="Sammy's Market 스토어 백엔드: 카탈로그, 장바구니, Redis 재고 락 기반 결제, "
    "판매자 도구, 관리자 대시보드, AI 상품 검색",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
app.include_router(products.router, prefix="/api", tags=["catalog"])
app.include_router(cart.router, prefix="/api/cart", tags=["cart"])
app.include_router(orders.router, prefix="/api/orders", tags=["orders"])
app.include_router(reviews.router, prefix="/api/reviews", tags=["reviews"])
app.include_router(seller.router, prefix="/api/seller", tags=["seller"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
app.include_router(search.router, prefix="/api", tags=["search"])


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "Sammy's Market API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스 체크 엔드포인트"""
    return {"status": "healthy"}

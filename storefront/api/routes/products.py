"""
카탈로그 API 엔드포인트

카테고리, 검색과 필터가 있는 상품 목록, 상품 상세, 관련 상품, 상품 리뷰.
조회에는 로그인이 필요 없습니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, require_admin
from storefront.core.exceptions import (
    CategoryAlreadyExistsException,
    ProductNotFoundException,
)
from storefront.models.profile import Profile
from storefront.schemas.catalog import (
    CategoryCreateRequest,
    CategoryResponse,
    PriceRange,
    ProductDetailResponse,
    ProductPage,
    ProductResponse,
    ReviewResponse,
    SellerInfo,
)
from storefront.services.category_service import CategoryService
from storefront.services.product_service import DEFAULT_PAGE_SIZE, ProductService


router = APIRouter()


@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    """전체 카테고리 (이름 순)"""
    return CategoryService.list_categories(db)


@router.post(
    "/categories",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    category_data: CategoryCreateRequest,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_admin),
):
    """
    카테고리 생성 (관리자)

    Raises:
        HTTPException 403: 관리자가 아닌 경우
        HTTPException 409: 이미 사용 중인 이름
    """
    try:
        return CategoryService.create_category(
            category_data.name, db, description=category_data.description
        )

    except CategoryAlreadyExistsException as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.get("/products", response_model=ProductPage)
def list_products(
    q: Optional[str] = Query(None, description="상품명/설명 검색어"),
    category_id: Optional[int] = Query(None, description="카테고리 필터"),
    price_range: Optional[PriceRange] = Query(None, description="가격대"),
    min_price: Optional[float] = Query(None, ge=0, description="최소 가격"),
    max_price: Optional[float] = Query(None, ge=0, description="최대 가격"),
    skip: int = Query(0, ge=0, description="건너뛸 레코드 수"),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100, description="페이지 크기"),
    db: Session = Depends(get_db),
):
    """
    카탈로그 검색, 필터링, 페이지 조회

    Example:
        Request:
        ```
        GET /api/products?q=necklace&price_range=50_100&skip=0&limit=9
        ```

        Response (200):
        ```json
        {
            "items": [{"id": 3, "name": "Ndebele Beaded Necklace", ...}],
            "total": 1,
            "has_more": false
        }
        ```
    """
    return ProductService.search_products(
        db,
        q=q,
        category_id=category_id,
        price_range=price_range,
        min_price=min_price,
        max_price=max_price,
        skip=skip,
        limit=limit,
    )


@router.get("/products/{product_id}", response_model=ProductDetailResponse)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    """
    판매자, 평균 평점, 리뷰 수를 포함한 상품 상세

    Raises:
        HTTPException 404: 존재하지 않는 상품
    """
    detail = ProductService.get_product_detail(product_id, db)

    if not detail:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id {product_id} not found",
        )

    seller = detail["seller"]
    return ProductDetailResponse(
        **ProductResponse.model_validate(detail["product"]).model_dump(),
        seller=SellerInfo(id=seller.id, name=seller.name) if seller else None,
        average_rating=detail["average_rating"],
        review_count=detail["review_count"],
    )


@router.get("/products/{product_id}/related", response_model=List[ProductResponse])
def get_related_products(
    product_id: int,
    limit: int = Query(4, ge=1, le=20),
    db: Session = Depends(get_db),
):
    """
    같은 카테고리의 다른 상품 (최대 `limit`개)

    Raises:
        HTTPException 404: 존재하지 않는 상품
    """
    try:
        return ProductService.related_products(product_id, db, limit=limit)

    except ProductNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.get("/products/{product_id}/reviews", response_model=List[ReviewResponse])
def get_product_reviews(
    product_id: int,
    db: Session = Depends(get_db),
):
    """
    상품 리뷰 (최신순)

    Raises:
        HTTPException 404: 존재하지 않는 상품
    """
    try:
        return ProductService.product_reviews(product_id, db)

    except ProductNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

"""
판매자 API 엔드포인트

재고 관리, 들어온 주문 처리, 매출 분석.
모든 엔드포인트는 판매자 (또는 관리자) 계정이 필요합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, require_seller
from storefront.core.exceptions import (
    CategoryNotFoundException,
    InvalidStatusTransitionException,
    OrderNotFoundException,
    PermissionDeniedException,
    ProductInUseException,
    ProductNotFoundException,
)
from storefront.models.profile import Profile
from storefront.schemas.analytics import SalesAnalyticsResponse
from storefront.schemas.catalog import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from storefront.schemas.order import (
    OrderItemResponse,
    OrderItemStatusRequest,
    SellerOrderResponse,
)
from storefront.services.analytics_service import AnalyticsService
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService


router = APIRouter()


@router.get("/products", response_model=List[ProductResponse])
def list_my_products(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_seller),
):
    """로그인한 판매자의 상품 목록"""
    return ProductService.list_seller_products(current_user.id, db)


@router.post(
    "/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED
)
def create_product(
    product_data: ProductCreateRequest,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_seller),
):
    """
    판매자 재고에 상품 추가

    Raises:
        HTTPException 403: 판매자가 아닌 경우
        HTTPException 404: 존재하지 않는 카테고리

    Example:
        Request:
        ```json
        {
            "name": "Ndebele Beaded Necklace",
            "description": "Colorful beaded necklace",
            "price": 89.99,
            "stock": 12,
            "category_id": 2
        }
        ```
    """
    try:
        return ProductService.create_product(
            name=product_data.name,
            price=product_data.price,
            stock=product_data.stock,
            seller=current_user,
            db=db,
            description=product_data.description,
            image_url=product_data.image_url,
            category_id=product_data.category_id,
        )

    except CategoryNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.patch("/products/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdateRequest,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_seller),
):
    """
    판매자 상품 부분 수정

    Raises:
        HTTPException 403: 다른 판매자의 상품
        HTTPException 404: 존재하지 않는 상품 또는 카테고리
    """
    try:
        return ProductService.update_product(
            product_id,
            product_data.model_dump(exclude_unset=True),
            current_user,
            db,
        )

    except (ProductNotFoundException, CategoryNotFoundException) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    except PermissionDeniedException as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_seller),
):
    """
    판매자 상품 삭제

    Raises:
        HTTPException 403: 다른 판매자의 상품
        HTTPException 404: 존재하지 않는 상품
        HTTPException 409: 이미 주문에 포함된 상품
    """
    try:
        ProductService.delete_product(product_id, current_user, db)

    except ProductNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    except PermissionDeniedException as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )

    except ProductInUseException as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.get("/orders", response_model=List[SellerOrderResponse])
def list_seller_orders(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_seller),
):
    """판매자 상품이 포함된 주문 (최신순)"""
    return OrderService.seller_orders(current_user, db)


@router.patch("/order-items/{item_id}", response_model=OrderItemResponse)
def update_order_item_status(
    item_id: int,
    status_data: OrderItemStatusRequest,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_seller),
):
    """
    판매자 주문 항목 상태 진행

    Raises:
        HTTPException 400: 상태가 뒤로 이동하는 경우
        HTTPException 404: 판매자 상품의 주문 항목이 아닌 경우

    Example:
        Request:
        ```json
        {"status": "shipped"}
        ```
    """
    try:
        return OrderService.update_item_status(
            item_id, status_data.status, current_user, db
        )

    except OrderNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    except InvalidStatusTransitionException as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/analytics", response_model=SalesAnalyticsResponse)
def get_sales_analytics(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_seller),
):
    """매출, 판매 수량, 카테고리별 매출, 상위 상품"""
    return AnalyticsService.seller_sales(current_user, db)

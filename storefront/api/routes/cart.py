"""
장바구니 API 엔드포인트

로그인한 사용자의 장바구니와 소계, 세금, 합계
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.core.config import Settings, get_settings
from storefront.core.exceptions import (
    CartItemNotFoundException,
    ProductNotFoundException,
)
from storefront.models.profile import Profile
from storefront.schemas.cart import CartAddRequest, CartQuantityRequest, CartResponse
from storefront.services.cart_service import CartService


router = APIRouter()


@router.get("", response_model=CartResponse)
def get_cart(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: Profile = Depends(get_current_user),
):
    """
    장바구니 내용과 합계 조회

    Example:
        Response (200):
        ```json
        {
            "items": [
                {
                    "product_id": 3,
                    "name": "Ndebele Beaded Necklace",
                    "price": 89.99,
                    "image_url": null,
                    "quantity": 2,
                    "line_total": 179.98
                }
            ],
            "item_count": 2,
            "subtotal": 179.98,
            "tax": 27.0,
            "total": 206.98
        }
        ```
    """
    return CartService.get_cart(current_user, db, settings)


@router.post("/items", response_model=CartResponse)
def add_to_cart(
    item_data: CartAddRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: Profile = Depends(get_current_user),
):
    """
    상품 담기 (이미 담긴 상품이면 수량 증가)

    Raises:
        HTTPException 404: 존재하지 않는 상품
    """
    try:
        CartService.add_item(
            current_user, item_data.product_id, db, quantity=item_data.quantity
        )

    except ProductNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return CartService.get_cart(current_user, db, settings)


@router.put("/items/{product_id}", response_model=CartResponse)
def update_cart_quantity(
    product_id: int,
    quantity_data: CartQuantityRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: Profile = Depends(get_current_user),
):
    """
    장바구니 항목 수량 변경 (1 미만은 무시)

    Raises:
        HTTPException 404: 장바구니에 없는 상품
    """
    try:
        CartService.update_quantity(current_user, product_id, quantity_data.quantity, db)

    except CartItemNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return CartService.get_cart(current_user, db, settings)


@router.delete("/items/{product_id}", response_model=CartResponse)
def remove_from_cart(
    product_id: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: Profile = Depends(get_current_user),
):
    """장바구니에서 상품 제거"""
    CartService.remove_item(current_user, product_id, db)
    return CartService.get_cart(current_user, db, settings)


@router.delete("", response_model=CartResponse)
def clear_cart(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    current_user: Profile = Depends(get_current_user),
):
    """장바구니 비우기"""
    CartService.clear(current_user, db)
    return CartService.get_cart(current_user, db, settings)

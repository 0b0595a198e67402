"""
결제 및 주문 API 엔드포인트

결제는 Redis 재고 락을 잡은 상태에서 장바구니 전체를 주문으로 만듭니다.
구매자는 이후 구매 내역과 본인 주문을 조회할 수 있습니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from redis import Redis
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.core.config import Settings, get_settings
from storefront.core.exceptions import (
    EmptyCartException,
    InsufficientStockException,
    LockAcquisitionException,
    OrderNotFoundException,
)
from storefront.db.redis_client import get_redis_client
from storefront.models.profile import Profile
from storefront.schemas.order import (
    CheckoutRequest,
    OrderResponse,
    PurchaseHistoryItem,
)
from storefront.services.order_service import OrderService


router = APIRouter()


@router.post(
    "/checkout", response_model=OrderResponse, status_code=status.HTTP_201_CREATED
)
def checkout(
    checkout_data: CheckoutRequest,
    db: Session = Depends(get_db),
    redis: Redis = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
    current_user: Profile = Depends(get_current_user),
):
    """
    장바구니 전체 주문 (결제는 받지 않음)

    Raises:
        HTTPException 400: 빈 장바구니 또는 재고 부족
        HTTPException 409: 다른 결제가 상품 락을 점유 중

    Example:
        Request:
        ```json
        {
            "shipping_address": {
                "full_name": "John Doe",
                "address": "12 Samora Machel Ave",
                "city": "Harare",
                "state": "Harare",
                "zip_code": "00263",
                "country": "Zimbabwe"
            }
        }
        ```

        Response (201):
        ```json
        {
            "id": 1,
            "buyer_id": 1,
            "status": "pending",
            "subtotal": 89.99,
            "tax": 13.5,
            "total": 103.49,
            "created_at": "2025-01-22T10:30:00Z",
            "items": [{"id": 1, "product_id": 3, "quantity": 1, "price": 89.99, ...}],
            "shipping_address": {...}
        }
        ```
    """
    try:
        return OrderService.checkout(
            user=current_user,
            shipping_address=checkout_data.shipping_address.model_dump(),
            db=db,
            redis=redis,
            settings=settings,
        )

    except (EmptyCartException, InsufficientStockException) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    except LockAcquisitionException as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.get("/history", response_model=List[PurchaseHistoryItem])
def get_purchase_history(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    """구매한 전체 항목 (최근 발송 순)"""
    return OrderService.purchase_history(current_user, db)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    """
    주문 항목과 배송지를 포함한 본인 주문 조회

    Raises:
        HTTPException 404: 해당 구매자의 주문이 없는 경우
    """
    try:
        return OrderService.get_order(order_id, current_user, db)

    except OrderNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

"""리뷰 API 엔드포인트"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_current_user
from storefront.core.exceptions import (
    OrderNotFoundException,
    ReviewAlreadyExistsException,
    ReviewNotAllowedException,
)
from storefront.models.profile import Profile
from storefront.schemas.catalog import ReviewResponse
from storefront.schemas.review import ReviewCreateRequest
from storefront.services.review_service import ReviewService


router = APIRouter()


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
def submit_review(
    review_data: ReviewCreateRequest,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    """
    주문에서 받은 상품 리뷰 작성

    Raises:
        HTTPException 400: 아직 발송되지 않은 항목
        HTTPException 404: 해당 주문에 구매자의 항목이 없는 경우
        HTTPException 409: 이미 리뷰한 항목
    """
    try:
        return ReviewService.submit_review(
            buyer=current_user,
            order_id=review_data.order_id,
            product_id=review_data.product_id,
            rating=review_data.rating,
            db=db,
            comment=review_data.comment,
        )

    except OrderNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    except ReviewNotAllowedException as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    except ReviewAlreadyExistsException as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )

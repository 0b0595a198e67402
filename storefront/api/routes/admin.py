"""
관리자 API 엔드포인트

사용자 관리와 스토어 전체 대시보드. 모든 엔드포인트는 관리자 계정이 필요합니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, require_admin
from storefront.core.exceptions import SelfDeletionException, UserNotFoundException
from storefront.models.profile import Profile
from storefront.schemas.analytics import (
    OverviewResponse,
    PromoteAdminRequest,
    RankingsResponse,
    RoleCount,
)
from storefront.schemas.auth import UserResponse
from storefront.services.admin_service import AdminService
from storefront.services.analytics_service import AnalyticsService


router = APIRouter()


@router.get("/users", response_model=List[UserResponse])
def list_users(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_admin),
):
    """전체 프로필 목록 (최근 가입 순)"""
    return AdminService.list_users(db)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_admin),
):
    """
    계정과 장바구니, 주문, 리뷰, 상품을 함께 삭제

    Raises:
        HTTPException 400: 관리자 본인 계정을 삭제하려는 경우
        HTTPException 404: 존재하지 않는 사용자
    """
    try:
        AdminService.delete_user(user_id, current_user, db)

    except SelfDeletionException as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    except UserNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post("/promote", response_model=UserResponse)
def promote_to_admin(
    promote_data: PromoteAdminRequest,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_admin),
):
    """
    기존 계정에 관리자 권한 부여

    Raises:
        HTTPException 404: 해당 이메일의 계정이 없는 경우
    """
    try:
        return AdminService.promote_to_admin(promote_data.email, current_user, db)

    except UserNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.get("/analytics/users", response_model=List[RoleCount])
def get_user_analytics(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_admin),
):
    """역할별 프로필 수"""
    return AnalyticsService.user_analytics(db)


@router.get("/overview", response_model=OverviewResponse)
def get_overview(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_admin),
):
    return AnalyticsService.overview(db)


@router.get("/rankings", response_model=RankingsResponse)
def get_rankings(
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: Profile = Depends(require_admin),
):
    """
    매출 기준 상위 판매자, 구매자, 상품, 카테고리

    Example:
        Response (200):
        ```json
        {
            "sellers": [{"seller_id": 2, "seller_name": "Tendai Crafts", ...}],
            "buyers": [...],
            "products": [...],
            "categories": [...]
        }
        ```
    """
    return AnalyticsService.rankings(db, limit=limit)

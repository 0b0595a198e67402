"""관리자용 사용자 관리 서비스"""

import logging

from sqlalchemy.orm import Session

from storefront.core.exceptions import SelfDeletionException, UserNotFoundException
from storefront.models import CartItem, Order, OrderItem, Product, Profile, Review
from storefront.models.profile import ROLE_ADMIN

logger = logging.getLogger(__name__)


class AdminService:
    """프로필 목록 조회, 계정 삭제, 관리자 승격"""

    @staticmethod
    def list_users(db: Session) -> list[Profile]:
        """전체 프로필을 최근 가입 순으로 반환합니다."""
        return (
            db.query(Profile)
            .order_by(Profile.created_at.desc(), Profile.id.desc())
            .all()
        )

    @staticmethod
    def delete_user(user_id: int, admin: Profile, db: Session) -> None:
        """
        계정과 그에 딸린 데이터를 삭제합니다.

        삭제 대상: 장바구니, 작성한 리뷰, 주문 내역(주문 항목, 배송지, 리뷰 포함),
        한 번도 주문되지 않은 상품.
        다른 사용자의 주문에 포함된 상품은 이력 보존을 위해 남기되
        판매자 연결을 끊고 재고를 0으로 만듭니다.

        Raises:
            SelfDeletionException: 관리자가 자기 계정을 삭제하려는 경우
            UserNotFoundException: 존재하지 않는 사용자 ID
        """
        if user_id == admin.id:
            raise SelfDeletionException()

        user = db.query(Profile).filter(Profile.id == user_id).first()
        if user is None:
            raise UserNotFoundException(user_id)

        db.query(CartItem).filter(CartItem.user_id == user_id).delete(
            synchronize_session=False
        )
        db.query(Review).filter(Review.buyer_id == user_id).delete(
            synchronize_session=False
        )

        for order in db.query(Order).filter(Order.buyer_id == user_id).all():
            db.query(Review).filter(Review.order_id == order.id).delete(
                synchronize_session=False
            )
            db.delete(order)
        db.flush()

        db.query(Review).filter(Review.seller_id == user_id).update(
            {Review.seller_id: None}, synchronize_session=False
        )

        for product in db.query(Product).filter(Product.seller_id == user_id).all():
            db.query(CartItem).filter(CartItem.product_id == product.id).delete(
                synchronize_session=False
            )
            ordered = (
                db.query(OrderItem.id)
                .filter(OrderItem.product_id == product.id)
                .first()
            )
            if ordered:
                product.seller_id = None
                product.stock = 0
            else:
                db.delete(product)
        db.flush()

        db.delete(user)
        db.commit()

        logger.info("Admin %s deleted user %s (%s)", admin.id, user_id, user.email)

    @staticmethod
    def promote_to_admin(email: str, admin: Profile, db: Session) -> Profile:
        """
        기존 계정에 관리자 권한을 부여합니다.

        Raises:
            UserNotFoundException: 해당 이메일의 프로필이 없는 경우
        """
        user = db.query(Profile).filter(Profile.email == email.lower()).first()
        if user is None:
            raise UserNotFoundException(email)

        user.role = ROLE_ADMIN
        db.commit()
        db.refresh(user)

        logger.info("Admin %s promoted %s to admin", admin.id, user.email)
        return user

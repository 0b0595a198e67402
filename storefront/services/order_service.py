"""
결제 및 주문 서비스

Redis 재고 락 아래에서 장바구니를 주문으로 전환하고,
구매 내역과 판매자 주문 처리를 담당합니다.
"""

import logging
from datetime import datetime

from redis import Redis
from sqlalchemy.orm import Session

from storefront.core.config import Settings
from storefront.core.exceptions import (
    EmptyCartException,
    InsufficientStockException,
    InvalidStatusTransitionException,
    OrderNotFoundException,
)
from storefront.models import (
    Order,
    OrderItem,
    Product,
    Profile,
    Review,
    ShippingAddress,
)
from storefront.models.order import ORDER_STATUSES, STATUS_PENDING, STATUS_SHIPPED
from storefront.services.cart_service import CartService, price_totals
from storefront.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

REVIEWABLE_STATUSES = ("shipped", "delivered")


def status_rank(status: str) -> int:
    return ORDER_STATUSES.index(status)


class OrderService:
    """결제, 구매 내역, 주문 처리"""

    @staticmethod
    def checkout(
        user: Profile,
        shipping_address: dict,
        db: Session,
        redis: Redis,
        settings: Settings,
    ) -> Order:
        """
        장바구니의 모든 상품을 주문합니다.

        처리 과정:
        1. 장바구니 조회 (비어 있으면 EmptyCartException)
        2. 장바구니의 모든 상품에 락 획득 (Redis, ID 오름차순)
        3. 상품을 다시 읽어 항목별 재고 확인
        4. 하나의 DB 트랜잭션에서:
           - 소계, 세금, 합계로 Order 생성 (pending)
           - 현재 단가로 OrderItem 생성
           - ShippingAddress 저장
           - 상품 재고 차감
           - 장바구니 비우기
        5. 락 해제

        결제는 받지 않습니다.

        Args:
            user: 구매자
            shipping_address: full_name, address, city, state, zip_code, country
            db: SQLAlchemy 세션
            redis: Redis 클라이언트
            settings: 애플리케이션 설정 (락 재시도, 세율)

        Returns:
            Order: 생성된 주문

        Raises:
            EmptyCartException: 장바구니가 비어 있는 경우
            LockAcquisitionException: 다른 결제가 상품 락을 계속 점유 중인 경우
            InsufficientStockException: 재고보다 많은 수량을 요청한 경우
        """
        cart_items = CartService.get_items(user, db)
        if not cart_items:
            raise EmptyCartException()

        quantities = {item.product_id: item.quantity for item in cart_items}

        with InventoryService.lock_products(quantities.keys(), redis, settings) as locked_ids:
            # 락 대기 중 재고가 바뀌었을 수 있음
            products = {
                product.id: product
                for product in db.query(Product)
                .filter(Product.id.in_(locked_ids))
                .populate_existing()
                .all()
            }

            for product_id in locked_ids:
                product = products[product_id]
                if product.stock < quantities[product_id]:
                    raise InsufficientStockException(
                        product_id, quantities[product_id], product.stock
                    )

            try:
                subtotal = sum(
                    products[pid].price * quantity for pid, quantity in quantities.items()
                )
                totals = price_totals(subtotal, settings.tax_rate)

                order = Order(buyer_id=user.id, status=STATUS_PENDING, **totals)
                db.add(order)

                for product_id in locked_ids:
                    product = products[product_id]
                    order.items.append(
                        OrderItem(
                            product_id=product_id,
                            quantity=quantities[product_id],
                            price=product.price,
                            status=STATUS_PENDING,
                        )
                    )
                    product.stock -= quantities[product_id]

                order.shipping_address = ShippingAddress(**shipping_address)

                CartService.clear(user, db, commit=False)

                db.commit()
                db.refresh(order)

            except Exception:
                db.rollback()
                logger.exception("Checkout failed for user %s", user.id)
                raise

        logger.info(
            "Order %s placed by user %s: %s line(s), total %.2f",
            order.id,
            user.id,
            len(locked_ids),
            order.total,
        )
        return order

    @staticmethod
    def get_order(order_id: int, user: Profile, db: Session) -> Order:
        """
        본인의 주문을 조회합니다.

        Raises:
            OrderNotFoundException: 해당 구매자의 주문이 아닌 경우
        """
        order = (
            db.query(Order)
            .filter(Order.id == order_id, Order.buyer_id == user.id)
            .first()
        )
        if order is None:
            raise OrderNotFoundException(order_id)
        return order

    @staticmethod
    def purchase_history(user: Profile, db: Session) -> list[dict]:
        """
        주문한 모든 항목을 최근 발송 순으로 반환합니다
        (아직 발송되지 않은 항목은 마지막).

        Returns:
            PurchaseHistoryItem 형태의 dict 리스트
        """
        rows = (
            db.query(OrderItem, Order)
            .join(Order, OrderItem.order_id == Order.id)
            .filter(Order.buyer_id == user.id)
            .order_by(
                OrderItem.shipped_at.is_(None).asc(),
                OrderItem.shipped_at.desc(),
                Order.created_at.desc(),
                OrderItem.id.asc(),
            )
            .all()
        )

        reviewed = {
            (order_id, product_id)
            for order_id, product_id in db.query(Review.order_id, Review.product_id)
            .filter(Review.buyer_id == user.id)
            .all()
        }

        history = []
        for item, order in rows:
            product = item.product
            already_reviewed = (item.order_id, item.product_id) in reviewed
            history.append(
                {
                    "id": item.id,
                    "order_id": item.order_id,
                    "product_id": item.product_id,
                    "quantity": item.quantity,
                    "price": item.price,
                    "status": item.status,
                    "shipped_at": item.shipped_at,
                    "ordered_at": order.created_at,
                    "product": {
                        "id": product.id,
                        "name": product.name,
                        "image_url": product.image_url,
                        "seller_id": product.seller_id,
                    },
                    "reviewed": already_reviewed,
                    "can_review": item.status in REVIEWABLE_STATUSES
                    and not already_reviewed,
                }
            )

        return history

    @staticmethod
    def seller_orders(seller: Profile, db: Session) -> list[dict]:
        """
        판매자의 상품이 포함된 주문을 최신순으로 반환합니다.
        각 주문에는 판매자 본인의 항목과 그 합계만 담깁니다.
        """
        rows = (
            db.query(OrderItem, Order, Product)
            .join(Order, OrderItem.order_id == Order.id)
            .join(Product, OrderItem.product_id == Product.id)
            .filter(Product.seller_id == seller.id)
            .order_by(Order.created_at.desc(), Order.id.desc(), OrderItem.id.asc())
            .all()
        )

        orders: dict[int, dict] = {}
        for item, order, product in rows:
            entry = orders.get(order.id)
            if entry is None:
                address = order.shipping_address
                entry = {
                    "id": order.id,
                    "created_at": order.created_at,
                    "status": order.status,
                    "total": 0.0,
                    "buyer_name": order.buyer.name,
                    "buyer_address": address.address if address else None,
                    "buyer_city": address.city if address else None,
                    "buyer_state": address.state if address else None,
                    "buyer_zip": address.zip_code if address else None,
                    "buyer_country": address.country if address else None,
                    "order_items": [],
                }
                orders[order.id] = entry

            entry["order_items"].append(
                {
                    "id": item.id,
                    "product_id": product.id,
                    "product_name": product.name,
                    "product_image": product.image_url,
                    "quantity": item.quantity,
                    "price": item.price,
                    "status": item.status,
                }
            )
            entry["total"] = round(entry["total"] + item.price * item.quantity, 2)

        return list(orders.values())

    @staticmethod
    def update_item_status(
        item_id: int, status: str, seller: Profile, db: Session
    ) -> OrderItem:
        """
        판매자 주문 항목의 처리 상태를 진행시킵니다.

        상태는 앞으로만 이동합니다 (pending -> processing -> shipped ->
        delivered). shipped가 되면 shipped_at을 기록하고, 주문 상태는
        항목 중 가장 덜 진행된 상태로 다시 계산합니다.

        Raises:
            OrderNotFoundException: 판매자 상품의 주문 항목이 아닌 경우
            InvalidStatusTransitionException: 상태가 뒤로 이동하는 경우
        """
        query = (
            db.query(OrderItem)
            .join(Product, OrderItem.product_id == Product.id)
            .filter(OrderItem.id == item_id)
        )
        if not seller.is_admin:
            query = query.filter(Product.seller_id == seller.id)

        item = query.first()
        if item is None:
            raise OrderNotFoundException(item_id, kind="Order item")

        if status_rank(status) < status_rank(item.status):
            raise InvalidStatusTransitionException(item.status, status)

        item.status = status
        if status_rank(status) >= status_rank(STATUS_SHIPPED) and item.shipped_at is None:
            item.shipped_at = datetime.utcnow()

        order = item.order
        order.status = min((i.status for i in order.items), key=status_rank)

        db.commit()
        db.refresh(item)

        logger.info("Order item %s moved to %s by user %s", item_id, status, seller.id)
        return item

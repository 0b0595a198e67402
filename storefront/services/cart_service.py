"""장바구니 서비스"""

from sqlalchemy.orm import Session

from storefront.core.config import Settings
from storefront.core.exceptions import CartItemNotFoundException
from storefront.models import CartItem, Profile
from storefront.services.product_service import ProductService


def round_money(value: float) -> float:
    return round(value, 2)


def price_totals(subtotal: float, tax_rate: float) -> dict:
    """
    소계에 대한 세금과 합계를 계산합니다.

    Example:
        >>> price_totals(100.0, 0.15)
        {'subtotal': 100.0, 'tax': 15.0, 'total': 115.0}
    """
    subtotal = round_money(subtotal)
    tax = round_money(subtotal * tax_rate)
    return {"subtotal": subtotal, "tax": tax, "total": round_money(subtotal + tax)}


class CartService:
    """cart_items 테이블에 저장되는 사용자별 장바구니"""

    @staticmethod
    def get_items(user: Profile, db: Session) -> list[CartItem]:
        return (
            db.query(CartItem)
            .filter(CartItem.user_id == user.id)
            .order_by(CartItem.added_at.asc(), CartItem.id.asc())
            .all()
        )

    @staticmethod
    def get_cart(user: Profile, db: Session, settings: Settings) -> dict:
        """
        장바구니 내용과 합계

        Returns:
            {
                "items": [{"product_id", "name", "price", "image_url", "quantity", "line_total"}],
                "item_count": int,
                "subtotal": float,
                "tax": float,
                "total": float
            }
        """
        lines = []
        subtotal = 0.0
        for item in CartService.get_items(user, db):
            product = item.product
            line_total = round_money(product.price * item.quantity)
            subtotal += product.price * item.quantity
            lines.append(
                {
                    "product_id": product.id,
                    "name": product.name,
                    "price": product.price,
                    "image_url": product.image_url,
                    "quantity": item.quantity,
                    "line_total": line_total,
                }
            )

        return {
            "items": lines,
            "item_count": sum(line["quantity"] for line in lines),
            **price_totals(subtotal, settings.tax_rate),
        }

    @staticmethod
    def add_item(user: Profile, product_id: int, db: Session, quantity: int = 1) -> CartItem:
        """
        상품을 장바구니에 담습니다. 이미 담긴 상품이면 수량을 더합니다.

        Raises:
            ProductNotFoundException: 존재하지 않는 상품
        """
        ProductService.require_product(product_id, db)

        item = (
            db.query(CartItem)
            .filter(CartItem.user_id == user.id, CartItem.product_id == product_id)
            .first()
        )
        if item:
            item.quantity += quantity
        else:
            item = CartItem(user_id=user.id, product_id=product_id, quantity=quantity)
            db.add(item)

        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def update_quantity(
        user: Profile, product_id: int, quantity: int, db: Session
    ) -> CartItem:
        """
        장바구니 항목의 수량을 변경합니다. 1 미만의 수량은 무시합니다.

        Raises:
            CartItemNotFoundException: 장바구니에 없는 상품
        """
        item = (
            db.query(CartItem)
            .filter(CartItem.user_id == user.id, CartItem.product_id == product_id)
            .first()
        )
        if item is None:
            raise CartItemNotFoundException(product_id)

        if quantity < 1:
            return item

        item.quantity = quantity
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def remove_item(user: Profile, product_id: int, db: Session) -> None:
        """장바구니에서 상품을 뺍니다 (없으면 아무 것도 하지 않음)."""
        db.query(CartItem).filter(
            CartItem.user_id == user.id, CartItem.product_id == product_id
        ).delete(synchronize_session=False)
        db.commit()

    @staticmethod
    def clear(user: Profile, db: Session, commit: bool = True) -> None:
        """장바구니를 비웁니다."""
        db.query(CartItem).filter(CartItem.user_id == user.id).delete(
            synchronize_session=False
        )
        if commit:
            db.commit()

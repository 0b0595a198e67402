"""
모델 테스트

컬럼 기본값, 유니크 제약, 관계 검증
"""

from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from storefront.models import CartItem, Order, OrderItem, Product, Review, ShippingAddress
from storefront.models.order import STATUS_PENDING


class TestProfileModel:
    def test_default_role(self, customer):
        """Test: 프로필 기본 역할은 customer"""
        assert customer.role == "customer"
        assert customer.is_admin is False
        assert isinstance(customer.created_at, datetime)

    def test_admin_flag(self, admin):
        assert admin.is_admin is True

    def test_email_unique(self, test_db, customer):
        """Test: 이메일 중복 불가"""
        from storefront.models import Profile

        test_db.add(Profile(name="Other", email=customer.email, hashed_password="x"))
        with pytest.raises(IntegrityError):
            test_db.commit()
        test_db.rollback()


class TestProductModel:
    def test_create_product(self, test_db, seller, categories):
        """Test: 모든 필드를 채운 상품"""
        product = Product(
            name="Traditional Shona Sculpture",
            description="Hand-carved stone sculpture",
            price=299.99,
            stock=5,
            image_url="https://images.unsplash.com/photo-1619637236033-8a97c1ee0c88",
            category_id=categories["Art"].id,
            seller_id=seller.id,
        )
        test_db.add(product)
        test_db.commit()
        test_db.refresh(product)

        assert product.id is not None
        assert product.category_name == "Art"
        assert product.seller.name == "Tendai Crafts"
        assert isinstance(product.created_at, datetime)
        assert isinstance(product.updated_at, datetime)

    def test_category_name_without_category(self, make_product):
        """Test: 카테고리 없는 상품은 category_name이 None"""
        product = make_product()

        assert product.category_name is None

    def test_category_backref(self, test_db, categories, make_product):
        make_product(name="Sculpture", category=categories["Art"])
        make_product(name="Wall Art", category=categories["Art"])
        test_db.refresh(categories["Art"])

        assert sorted(p.name for p in categories["Art"].products) == ["Sculpture", "Wall Art"]


class TestCartItemModel:
    def test_one_line_per_product(self, test_db, customer, make_product):
        """Test: 장바구니에서 (사용자, 상품)은 유일"""
        product = make_product()
        test_db.add(CartItem(user_id=customer.id, product_id=product.id, quantity=1))
        test_db.commit()

        test_db.add(CartItem(user_id=customer.id, product_id=product.id, quantity=2))
        with pytest.raises(IntegrityError):
            test_db.commit()
        test_db.rollback()


class TestOrderModel:
    def _order(self, test_db, customer, product):
        order = Order(buyer_id=customer.id, subtotal=59.99, tax=9.0, total=68.99)
        order.items.append(OrderItem(product_id=product.id, quantity=1, price=59.99))
        order.shipping_address = ShippingAddress(
            full_name="Chipo Moyo",
            address="12 Samora Machel Ave",
            city="Harare",
            state="Harare",
            zip_code="00263",
            country="Zimbabwe",
        )
        test_db.add(order)
        test_db.commit()
        test_db.refresh(order)
        return order

    def test_order_defaults(self, test_db, customer, make_product):
        """Test: 새 주문과 항목은 pending으로 시작"""
        order = self._order(test_db, customer, make_product())

        assert order.status == STATUS_PENDING
        assert order.items[0].status == STATUS_PENDING
        assert order.items[0].shipped_at is None
        assert order.items[0].line_total == 59.99
        assert order.shipping_address.city == "Harare"
        assert order.buyer.email == customer.email

    def test_delete_cascades(self, test_db, customer, make_product):
        """Test: 주문 삭제 시 항목과 배송지도 삭제"""
        order = self._order(test_db, customer, make_product())

        test_db.delete(order)
        test_db.commit()

        assert test_db.query(OrderItem).count() == 0
        assert test_db.query(ShippingAddress).count() == 0


class TestReviewModel:
    def test_one_review_per_order_product(self, test_db, customer, seller, make_product):
        """Test: 리뷰에서 (주문, 상품)은 유일"""
        product = make_product()
        order = Order(buyer_id=customer.id, subtotal=1, tax=0, total=1)
        test_db.add(order)
        test_db.commit()

        test_db.add(
            Review(
                order_id=order.id,
                product_id=product.id,
                buyer_id=customer.id,
                seller_id=seller.id,
                rating=5,
            )
        )
        test_db.commit()
        review = test_db.query(Review).one()
        assert review.buyer_name == "Chipo Moyo"

        test_db.add(
            Review(order_id=order.id, product_id=product.id, buyer_id=customer.id, rating=1)
        )
        with pytest.raises(IntegrityError):
            test_db.commit()
        test_db.rollback()

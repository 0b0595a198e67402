"""ProductService, CategoryService 테스트"""

from datetime import datetime, timedelta

import pytest

from storefront.core.exceptions import (
    CategoryAlreadyExistsException,
    CategoryNotFoundException,
    PermissionDeniedException,
    ProductInUseException,
    ProductNotFoundException,
)
from storefront.models import CartItem, Order, OrderItem, Product, Review
from storefront.services.category_service import CategoryService
from storefront.services.product_service import ProductService


def place_order(test_db, buyer, product, quantity=1, status="shipped"):
    """상품 하나에 대한 주문을 직접 저장합니다."""
    order = Order(
        buyer_id=buyer.id,
        subtotal=product.price * quantity,
        tax=0,
        total=product.price * quantity,
    )
    order.items.append(
        OrderItem(product_id=product.id, quantity=quantity, price=product.price, status=status)
    )
    test_db.add(order)
    test_db.commit()
    return order


class TestCategoryService:
    def test_list_categories_by_name(self, test_db):
        for name in ("Jewelry", "Art", "Crafts"):
            CategoryService.create_category(name, test_db)

        names = [c.name for c in CategoryService.list_categories(test_db)]

        assert names == ["Art", "Crafts", "Jewelry"]

    def test_create_duplicate_category(self, test_db, categories):
        with pytest.raises(CategoryAlreadyExistsException):
            CategoryService.create_category("Art", test_db)

    def test_require_unknown_category(self, test_db):
        with pytest.raises(CategoryNotFoundException):
            CategoryService.require_category(42, test_db)


class TestSearchProducts:
    """Test: 카탈로그 목록 필터 테스트"""

    def test_text_search_name_and_description(self, test_db, make_product):
        """Test: q는 대소문자 구분 없이 상품명 또는 설명과 매칭"""
        make_product(name="Ndebele Beaded Necklace", description="Colorful beads")
        make_product(name="Zimbabwe Basket", description="Handwoven with natural fibers")
        make_product(name="Ceremonial Drum", description="Wooden drum")

        by_name = ProductService.search_products(test_db, q="necklace")
        by_description = ProductService.search_products(test_db, q="HANDWOVEN")

        assert [p.name for p in by_name["items"]] == ["Ndebele Beaded Necklace"]
        assert [p.name for p in by_description["items"]] == ["Zimbabwe Basket"]

    def test_text_search_wildcards_are_literal(self, test_db, make_product):
        """Test: q의 %와 _는 문자 그대로만 매칭"""
        make_product(name="Zimbabwe Basket", description="Handwoven")
        make_product(name="Soapstone Bird", description="20% off this week")
        make_product(name="Copper_Ring", description=None)

        percent = ProductService.search_products(test_db, q="%")
        underscore = ProductService.search_products(test_db, q="_")

        assert [p.name for p in percent["items"]] == ["Soapstone Bird"]
        assert [p.name for p in underscore["items"]] == ["Copper_Ring"]

    def test_category_filter(self, test_db, categories, make_product):
        make_product(name="Sculpture", category=categories["Art"])
        make_product(name="Necklace", category=categories["Jewelry"])

        result = ProductService.search_products(test_db, category_id=categories["Art"].id)

        assert [p.name for p in result["items"]] == ["Sculpture"]
        assert result["total"] == 1

    @pytest.mark.parametrize(
        "price_range, expected",
        [
            ("under_50", ["p49.99"]),
            ("50_100", ["p50", "p100"]),
            ("100_200", ["p100.01", "p200"]),
            ("over_200", ["p200.01"]),
        ],
    )
    def test_price_range_bounds(self, test_db, make_product, price_range, expected):
        """Test: 가격대 경계는 [0,50) [50,100] (100,200] (200,inf)"""
        for price in (49.99, 50, 100, 100.01, 200, 200.01):
            make_product(name=f"p{price}", price=price)

        result = ProductService.search_products(test_db, price_range=price_range)

        assert [p.name for p in result["items"]] == expected

    def test_min_max_price(self, test_db, make_product):
        for price in (10, 60, 150):
            make_product(name=f"p{price}", price=price)

        result = ProductService.search_products(test_db, min_price=50, max_price=150)

        assert [p.name for p in result["items"]] == ["p60", "p150"]

    def test_pagination(self, test_db, make_product):
        """Test: 페이지당 9개, has_more 표시"""
        for i in range(12):
            make_product(name=f"Item {i}")

        first = ProductService.search_products(test_db)
        second = ProductService.search_products(test_db, skip=9)

        assert len(first["items"]) == 9
        assert first["total"] == 12
        assert first["has_more"] is True
        assert [p.name for p in second["items"]] == ["Item 9", "Item 10", "Item 11"]
        assert second["has_more"] is False


class TestProductDetail:
    def test_detail_with_ratings(self, test_db, seller, make_user, make_product):
        product = make_product(name="Ceremonial Drum", price=199.99)
        for rating in (4, 5):
            buyer = make_user()
            order = place_order(test_db, buyer, product)
            test_db.add(
                Review(
                    order_id=order.id,
                    product_id=product.id,
                    buyer_id=buyer.id,
                    seller_id=seller.id,
                    rating=rating,
                )
            )
        test_db.commit()

        detail = ProductService.get_product_detail(product.id, test_db)

        assert detail["product"].id == product.id
        assert detail["seller"].name == "Tendai Crafts"
        assert detail["average_rating"] == 4.5
        assert detail["review_count"] == 2

    def test_detail_unrated(self, test_db, make_product):
        detail = ProductService.get_product_detail(make_product().id, test_db)

        assert detail["average_rating"] is None
        assert detail["review_count"] == 0

    def test_detail_unknown_product(self, test_db):
        assert ProductService.get_product_detail(999, test_db) is None

    def test_related_products_same_category(self, test_db, categories, make_product):
        """Test: 자기 자신을 제외한 같은 카테고리 상품 최대 4개"""
        art = categories["Art"]
        product = make_product(name="Main", category=art)
        for i in range(5):
            make_product(name=f"Art {i}", category=art)
        make_product(name="Necklace", category=categories["Jewelry"])

        related = ProductService.related_products(product.id, test_db)

        assert [p.name for p in related] == ["Art 0", "Art 1", "Art 2", "Art 3"]

    def test_related_unknown_product(self, test_db):
        with pytest.raises(ProductNotFoundException):
            ProductService.related_products(999, test_db)

    def test_reviews_newest_first(self, test_db, seller, customer, make_product):
        product = make_product()
        first = place_order(test_db, customer, product)
        second = place_order(test_db, customer, product)
        now = datetime.utcnow()
        test_db.add_all(
            [
                Review(order_id=first.id, product_id=product.id, buyer_id=customer.id,
                       rating=3, created_at=now - timedelta(days=1)),
                Review(order_id=second.id, product_id=product.id, buyer_id=customer.id,
                       rating=5, created_at=now),
            ]
        )
        test_db.commit()

        reviews = ProductService.product_reviews(product.id, test_db)

        assert [r.rating for r in reviews] == [5, 3]
        assert reviews[0].buyer_name == "Chipo Moyo"


class TestSellerInventory:
    """Test: 판매자 상품 관리 테스트"""

    def test_create_product(self, test_db, seller, categories):
        product = ProductService.create_product(
            name="Tribal Wall Art",
            price=149.99,
            stock=6,
            seller=seller,
            db=test_db,
            category_id=categories["Art"].id,
        )

        assert product.seller_id == seller.id
        assert product.category_name == "Art"
        assert ProductService.list_seller_products(seller.id, test_db) == [product]

    def test_create_product_unknown_category(self, test_db, seller):
        with pytest.raises(CategoryNotFoundException):
            ProductService.create_product("X", 10, 1, seller, test_db, category_id=99)

    def test_update_product_partial(self, test_db, seller, make_product):
        """Test: 전달한 필드만 변경"""
        product = make_product(name="Basket", price=59.99, stock=10)

        updated = ProductService.update_product(
            product.id, {"price": 64.5, "seller_id": 12345}, seller, test_db
        )

        assert updated.price == 64.5
        assert updated.name == "Basket"
        assert updated.stock == 10
        assert updated.seller_id == seller.id

    def test_update_product_other_seller(self, test_db, make_user, make_product):
        product = make_product()
        other = make_user("seller")

        with pytest.raises(PermissionDeniedException):
            ProductService.update_product(product.id, {"stock": 0}, other, test_db)

    def test_update_product_as_admin(self, test_db, admin, make_product):
        product = make_product()

        updated = ProductService.update_product(product.id, {"stock": 0}, admin, test_db)

        assert updated.stock == 0

    def test_update_unknown_product(self, test_db, seller):
        with pytest.raises(ProductNotFoundException):
            ProductService.update_product(999, {"stock": 1}, seller, test_db)

    def test_delete_product_clears_carts(self, test_db, seller, customer, make_product):
        product = make_product()
        test_db.add(CartItem(user_id=customer.id, product_id=product.id, quantity=2))
        test_db.commit()

        ProductService.delete_product(product.id, seller, test_db)

        assert test_db.query(Product).count() == 0
        assert test_db.query(CartItem).count() == 0

    def test_delete_product_other_seller(self, test_db, make_user, make_product):
        product = make_product()

        with pytest.raises(PermissionDeniedException):
            ProductService.delete_product(product.id, make_user("seller"), test_db)

    def test_delete_ordered_product(self, test_db, seller, customer, make_product):
        """Test: 주문 이력이 있는 상품은 삭제 불가"""
        product = make_product()
        place_order(test_db, customer, product)

        with pytest.raises(ProductInUseException):
            ProductService.delete_product(product.id, seller, test_db)

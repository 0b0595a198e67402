"""데모 데이터 로더 테스트"""

from storefront.models import Category, Product
from storefront.models.profile import ROLE_ADMIN, ROLE_SELLER
from storefront.seed import DEFAULT_CATEGORIES, SAMPLE_PRODUCTS, seed


class TestSeed:
    def test_seed_populates_store(self, test_db):
        result = seed(test_db, "admin@example.com", "admin1234", "seller@example.com", "seller1234")

        assert result["admin"].role == ROLE_ADMIN
        assert result["seller"].role == ROLE_SELLER
        assert result["categories"] == len(DEFAULT_CATEGORIES)
        assert result["products_created"] == len(SAMPLE_PRODUCTS)
        assert test_db.query(Product).count() == len(SAMPLE_PRODUCTS)
        assert all(p.seller_id == result["seller"].id for p in test_db.query(Product).all())

    def test_seed_is_idempotent(self, test_db):
        args = (test_db, "admin@example.com", "admin1234", "seller@example.com", "seller1234")
        seed(*args)

        result = seed(*args)

        assert result["products_created"] == 0
        assert test_db.query(Category).count() == len(DEFAULT_CATEGORIES)
        assert test_db.query(Product).count() == len(SAMPLE_PRODUCTS)

    def test_existing_account_gets_role(self, test_db, customer):
        """Test: 관리자로 지정된 기존 customer는 관리자로 승격"""
        result = seed(test_db, customer.email, "ignored", "seller@example.com", "seller1234")

        assert result["admin"].id == customer.id
        assert result["admin"].role == ROLE_ADMIN

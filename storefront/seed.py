"""
데모 데이터 생성

기본 카테고리, 관리자 계정, 데모 판매자, 샘플 상품을 만듭니다.
여러 번 실행해도 기존 데이터는 그대로 둡니다.

Usage:
    python -m storefront.seed
    python -m storefront.seed --admin-email admin@sammys.market --admin-password admin1234
"""

import argparse
import logging

from sqlalchemy.orm import Session

from storefront.core.config import get_settings
from storefront.core.logging import configure_logging
from storefront.db.database import SessionLocal, init_db
from storefront.models import Category, Product, Profile
from storefront.models.profile import ROLE_ADMIN, ROLE_SELLER
from storefront.services.auth_service import AuthService

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = {
    "Crafts": "Handmade crafts and woven goods",
    "Jewelry": "Beaded necklaces, bracelets and earrings",
    "Clothing": "Garments made with African print fabric",
    "Art": "Sculpture, carvings and wall art",
    "Home Decor": "Baskets, drums and decorative pieces",
}

# (상품명, 설명, 가격, 재고, 이미지 URL, 카테고리)
SAMPLE_PRODUCTS = [
    (
        "Traditional Shona Sculpture",
        "Hand-carved stone sculpture representing the spirit of Zimbabwe's cultural heritage.",
        299.99,
        5,
        "https://images.unsplash.com/photo-1619637236033-8a97c1ee0c88",
        "Art",
    ),
    (
        "Ndebele Beaded Necklace",
        "Colorful beaded necklace crafted using traditional Ndebele beading techniques.",
        89.99,
        12,
        "https://images.unsplash.com/photo-1535632066927-ab7c9ab60908",
        "Jewelry",
    ),
    (
        "Zimbabwe Basket",
        "Handwoven basket using natural fibers and traditional patterns.",
        59.99,
        20,
        "https://images.unsplash.com/photo-1609540969455-ad5ea19be121",
        "Crafts",
    ),
    (
        "African Print Dress",
        "Modern dress made with traditional African print fabric.",
        129.99,
        8,
        "https://images.unsplash.com/photo-1544441893-675973e31985",
        "Clothing",
    ),
    (
        "Ceremonial Drum",
        "Traditional wooden drum used in Zimbabwean ceremonies and celebrations.",
        199.99,
        4,
        "https://images.unsplash.com/photo-1445985543470-41fba5c3144a",
        "Home Decor",
    ),
    (
        "Tribal Wall Art",
        "Contemporary wall art inspired by traditional Zimbabwean patterns.",
        149.99,
        6,
        "https://images.unsplash.com/photo-1549887534-1541e9326642",
        "Art",
    ),
]


def ensure_profile(db: Session, name: str, email: str, password: str, role: str) -> Profile:
    """이메일로 프로필을 조회하고, 없으면 주어진 역할로 생성합니다."""
    profile = db.query(Profile).filter(Profile.email == email.lower()).first()
    if profile is None:
        profile = AuthService.register_user(name, email, password, db)
        logger.info("Created %s account %s", role, email)

    if profile.role != role:
        profile.role = role
        db.commit()

    return profile


def seed_categories(db: Session) -> dict:
    """없는 기본 카테고리를 생성합니다. {이름: Category} 반환"""
    categories = {c.name: c for c in db.query(Category).all()}
    for name, description in DEFAULT_CATEGORIES.items():
        if name not in categories:
            category = Category(name=name, description=description)
            db.add(category)
            categories[name] = category
    db.commit()
    return categories


def seed_products(db: Session, seller: Profile, categories: dict) -> int:
    """판매자에게 아직 없는 샘플 상품을 생성하고 생성 개수를 반환합니다."""
    existing = {
        name for (name,) in db.query(Product.name).filter(Product.seller_id == seller.id)
    }

    created = 0
    for name, description, price, stock, image_url, category in SAMPLE_PRODUCTS:
        if name in existing:
            continue
        db.add(
            Product(
                name=name,
                description=description,
                price=price,
                stock=stock,
                image_url=image_url,
                category_id=categories[category].id,
                seller_id=seller.id,
            )
        )
        created += 1

    db.commit()
    return created


def seed(
    db: Session,
    admin_email: str,
    admin_password: str,
    seller_email: str,
    seller_password: str,
) -> dict:
    """
    스토어에 데모 데이터를 채웁니다.

    Returns:
        {"admin": Profile, "seller": Profile, "categories": int, "products_created": int}
    """
    categories = seed_categories(db)
    admin = ensure_profile(db, "Store Admin", admin_email, admin_password, ROLE_ADMIN)
    seller = ensure_profile(db, "Tendai Crafts", seller_email, seller_password, ROLE_SELLER)
    created = seed_products(db, seller, categories)

    return {
        "admin": admin,
        "seller": seller,
        "categories": len(categories),
        "products_created": created,
    }


def main():
    parser = argparse.ArgumentParser(description="Load Sammy's Market demo data")
    parser.add_argument("--admin-email", default="admin@sammys.market")
    parser.add_argument("--admin-password", default="admin1234")
    parser.add_argument("--seller-email", default="seller@sammys.market")
    parser.add_argument("--seller-password", default="seller1234")
    args = parser.parse_args()

    configure_logging(get_settings())
    init_db()

    db = SessionLocal()
    try:
        result = seed(
            db,
            args.admin_email,
            args.admin_password,
            args.seller_email,
            args.seller_password,
        )
    finally:
        db.close()

    print(f"Categories: {result['categories']}")
    print(f"Admin: {args.admin_email}")
    print(f"Seller: {args.seller_email}")
    print(f"Products created: {result['products_created']}")


if __name__ == "__main__":
    main()

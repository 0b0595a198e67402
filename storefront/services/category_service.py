"""카테고리 서비스"""

from typing import Optional

from sqlalchemy.orm import Session

from storefront.core.exceptions import (
    CategoryAlreadyExistsException,
    CategoryNotFoundException,
)
from storefront.models import Category


class CategoryService:
    """카테고리 조회 및 생성"""

    @staticmethod
    def list_categories(db: Session) -> list[Category]:
        """전체 카테고리를 이름 순으로 반환합니다."""
        return db.query(Category).order_by(Category.name.asc()).all()

    @staticmethod
    def get_category(category_id: int, db: Session) -> Optional[Category]:
        return db.query(Category).filter(Category.id == category_id).first()

    @staticmethod
    def require_category(category_id: int, db: Session) -> Category:
        """
        카테고리를 조회하고, 없으면 예외를 발생시킵니다.

        Raises:
            CategoryNotFoundException: 존재하지 않는 카테고리 ID
        """
        category = CategoryService.get_category(category_id, db)
        if category is None:
            raise CategoryNotFoundException(category_id)
        return category

    @staticmethod
    def create_category(
        name: str, db: Session, description: Optional[str] = None
    ) -> Category:
        """
        카테고리를 생성합니다.

        Raises:
            CategoryAlreadyExistsException: 이미 사용 중인 이름
        """
        if db.query(Category).filter(Category.name == name).first():
            raise CategoryAlreadyExistsException(name)

        category = Category(name=name, description=description)
        db.add(category)
        db.commit()
        db.refresh(category)

        return category

"""
카탈로그 스키마 (카테고리, 상품, 상품 리뷰)
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

PriceRange = Literal["under_50", "50_100", "100_200", "over_200"]


class CategoryCreateRequest(BaseModel):
    """
    카테고리 생성 요청

    Example:
        {"name": "Jewelry", "description": "Beaded necklaces and bracelets"}
    """

    name: str = Field(..., min_length=1, max_length=100, examples=["Jewelry"])
    description: Optional[str] = Field(None, description="카테고리 설명")


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None


class ProductCreateRequest(BaseModel):
    """
    상품 생성 요청 스키마 (판매자)

    Example:
        {
            "name": "Ndebele Beaded Necklace",
            "description": "Colorful beaded necklace",
            "price": 89.99,
            "stock": 12,
            "category_id": 2
        }
    """

    name: str = Field(
        ..., min_length=1, max_length=200, description="상품명",
        examples=["Ndebele Beaded Necklace"],
    )
    description: Optional[str] = Field(None, description="상품 설명")
    price: float = Field(..., gt=0, description="단가 (양수)", examples=[89.99])
    stock: int = Field(..., ge=0, description="재고 수량 (0 이상)", examples=[12])
    image_url: Optional[str] = Field(None, max_length=500, description="이미지 URL")
    category_id: Optional[int] = Field(None, description="카테고리 ID")


class ProductUpdateRequest(BaseModel):
    """상품 부분 수정 요청 (판매자). 생략한 필드는 그대로 유지"""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0)
    stock: Optional[int] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, max_length=500)
    category_id: Optional[int] = None

    @field_validator("name", "price", "stock")
    @classmethod
    def not_null(cls, value):
        # 생략은 허용, NOT NULL 컬럼에 null은 거부
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ProductResponse(BaseModel):
    """
    상품 응답 스키마

    Example:
        {
            "id": 1,
            "name": "Traditional Shona Sculpture",
            "description": "Hand-carved stone sculpture",
            "price": 299.99,
            "stock": 5,
            "image_url": "https://images.unsplash.com/photo-1619637236033-8a97c1ee0c88",
            "category_id": 1,
            "category_name": "Art",
            "seller_id": 2,
            "created_at": "2025-01-22T10:30:00Z",
            "updated_at": "2025-01-22T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="상품 ID")
    name: str = Field(..., description="상품명")
    description: Optional[str] = Field(None, description="상품 설명")
    price: float = Field(..., description="단가")
    stock: int = Field(..., description="재고 수량")
    image_url: Optional[str] = Field(None, description="이미지 URL")
    category_id: Optional[int] = Field(None, description="카테고리 ID")
    category_name: Optional[str] = Field(None, description="카테고리명")
    seller_id: Optional[int] = Field(None, description="판매자 ID")
    created_at: datetime = Field(..., description="생성 시간")
    updated_at: datetime = Field(..., description="수정 시간")


class ProductPage(BaseModel):
    """상품 목록 한 페이지"""

    items: list[ProductResponse]
    total: int = Field(..., description="필터에 맞는 전체 상품 수")
    has_more: bool = Field(..., description="다음 페이지 존재 여부")


class SellerInfo(BaseModel):
    id: int
    name: str


class ProductDetailResponse(ProductResponse):
    """상품 상세 페이지 데이터"""

    seller: Optional[SellerInfo] = None
    average_rating: Optional[float] = Field(None, description="평균 별점 (리뷰가 없으면 null)")
    review_count: int = 0


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: int
    product_id: int
    buyer_id: int
    buyer_name: Optional[str] = None
    seller_id: Optional[int] = None
    rating: int
    comment: Optional[str] = None
    created_at: datetime

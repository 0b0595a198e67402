"""
AI 상품 검색 스키마
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

SEARCH_ERROR_EXPLANATION = (
    "Sorry, I encountered an error while searching for products. Please try again."
)


class ProductSearchRequest(BaseModel):
    """
    Example:
        {"query": "a traditional gift for my mother"}
    """

    query: Optional[str] = Field(None, description="자연어 쇼핑 요청")


class SearchProduct(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    price: float
    image_url: Optional[str] = None
    stock: int
    category_name: Optional[str] = None


class ProductSearchResponse(BaseModel):
    products: list[SearchProduct]
    explanation: str
    query: str


class ProductSearchErrorResponse(BaseModel):
    error: str
    products: list[SearchProduct] = []
    explanation: str = SEARCH_ERROR_EXPLANATION

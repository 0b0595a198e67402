"""
리뷰 작성 스키마
"""

from typing import Optional

from pydantic import BaseModel, Field


class ReviewCreateRequest(BaseModel):
    """
    리뷰 작성 요청

    Example:
        {"order_id": 1, "product_id": 3, "rating": 5, "comment": "Beautiful work"}
    """

    order_id: int = Field(..., gt=0)
    product_id: int = Field(..., gt=0)
    rating: int = Field(..., ge=1, le=5, description="별점 (1-5)")
    comment: Optional[str] = Field(None, max_length=2000)

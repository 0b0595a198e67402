"""
AI 상품 검색 API 엔드포인트

자유 형식 쇼핑 요청과 카탈로그를 chat-completion API에 전달하고
일치하는 상품을 응답합니다. 어떤 실패든 빈 상품 목록과 고정 안내 문구로 500을 응답합니다.
"""

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, get_llm_transport
from storefront.core.config import Settings, get_settings
from storefront.core.exceptions import ProductSearchException
from storefront.schemas.search import (
    ProductSearchErrorResponse,
    ProductSearchRequest,
    ProductSearchResponse,
    SearchProduct,
)
from storefront.services.search_service import ProductSearchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/product-search-ai",
    response_model=ProductSearchResponse,
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ProductSearchErrorResponse}
    },
)
def product_search_ai(
    search_data: Optional[ProductSearchRequest] = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.BaseTransport] = Depends(get_llm_transport),
):
    """
    쇼핑 도우미에게 상품 추천 요청

    Example:
        Request:
        ```json
        {"query": "a traditional gift for my mother"}
        ```

        Response (200):
        ```json
        {
            "products": [{"id": 1, "name": "Traditional Shona Sculpture", ...}],
            "explanation": "This hand-carved sculpture is a traditional gift.",
            "query": "a traditional gift for my mother"
        }
        ```

        Response (500):
        ```json
        {
            "error": "Invalid response from AI",
            "products": [],
            "explanation": "Sorry, I encountered an error while searching for products. Please try again."
        }
        ```
    """
    query = search_data.query if search_data else None

    try:
        result = ProductSearchService.search(query, db, settings, transport=transport)
        return ProductSearchResponse(
            products=[SearchProduct.model_validate(p) for p in result["products"]],
            explanation=result["explanation"],
            query=result["query"],
        )

    except ProductSearchException as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ProductSearchErrorResponse(error=e.message).model_dump(),
        )

    except Exception as e:
        logger.exception("AI product search failed for query %r", query)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ProductSearchErrorResponse(error=str(e) or type(e).__name__).model_dump(),
        )


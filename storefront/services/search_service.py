"""
AI 상품 검색 서비스

카탈로그를 chat-completion 모델용으로 정리해 사용자 질의와 함께 전달하고,
모델이 돌려준 ID에 해당하는 상품만 남깁니다.
"""

import json
import logging
from typing import Optional

import httpx
from sqlalchemy.orm import Session, joinedload

from storefront.connectors.chat_completion import (
    ChatCompletionConnector,
    ChatCompletionError,
)
from storefront.core.config import Settings
from storefront.core.exceptions import ProductSearchException
from storefront.models import Product

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a helpful shopping assistant for Sammy's Market, a Zimbabwe marketplace. Your job is to help customers find products that match their needs.

Here is the current product inventory:
{product_list}

When a user asks for product recommendations:
1. Analyze their request carefully
2. Find products that match their description (look for keywords, cultural references, occasions, etc.)
3. Return the product IDs of ALL matching items as a JSON array (not just one product)
4. If multiple products could work, include them all (up to 5 most relevant)
5. If no products match, return an empty array
6. Consider synonyms, cultural context, and related terms (e.g., "soko" relates to elephant/traditional items, "jewellery" could match necklaces or beaded items, "traditional" could match sculptures or cultural items)
7. Look at both product names AND descriptions for matches

Respond with ONLY a JSON object in this format:
{{
  "product_ids": ["id1", "id2", "id3"],
  "explanation": "Brief explanation of why these products match the request and how many options were found"
}}"""


def format_price(price: float) -> str:
    """
    Example:
        >>> format_price(299.99), format_price(50.0)
        ('299.99', '50')
    """
    return f"{price:.2f}".rstrip("0").rstrip(".")


def format_product_line(product: Product) -> str:
    category = product.category.name if product.category else "No category"
    return (
        f"ID: {product.id}, Name: {product.name}, "
        f"Description: {product.description or 'No description'}, "
        f"Price: ${format_price(product.price)}, Category: {category}, "
        f"Stock: {product.stock}"
    )


def parse_model_reply(content: str) -> dict:
    """
    모델 응답에서 상품 ID 목록과 설명을 추출합니다.

    Returns:
        {"product_ids": set[str], "explanation": str}

    Raises:
        ProductSearchException: 응답이 예상한 JSON 객체가 아닌 경우
    """
    try:
        reply = json.loads(content)
    except (TypeError, ValueError):
        logger.error("Failed to parse AI response: %r", content)
        raise ProductSearchException("Invalid response from AI")

    if not isinstance(reply, dict) or not isinstance(reply.get("product_ids"), list):
        logger.error("AI response is missing product_ids: %r", content)
        raise ProductSearchException("Invalid response from AI")

    return {
        "product_ids": {str(product_id) for product_id in reply["product_ids"]},
        "explanation": str(reply.get("explanation") or ""),
    }


class ProductSearchService:
    """대화형 상품 검색"""

    @staticmethod
    def search(
        query: Optional[str],
        db: Session,
        settings: Settings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> dict:
        """
        자유 형식 요청에 맞는 카탈로그 상품을 찾습니다.

        Args:
            query: 사용자 요청
            db: DB 세션
            settings: 애플리케이션 설정 (llm_* 항목)
            transport: 모델 호출용 httpx transport 교체 (테스트용)

        Returns:
            {"products": list[Product], "explanation": str, "query": str}

        Raises:
            ProductSearchException: 빈 질의, 모델 호출 실패, 해석할 수 없는 응답
        """
        if not query or not query.strip():
            raise ProductSearchException("No search query provided")

        logger.info("Received search query: %s", query)

        products = (
            db.query(Product)
            .options(joinedload(Product.category))
            .order_by(Product.id.asc())
            .all()
        )
        logger.info("Fetched %s products for AI search", len(products))

        product_list = "\n".join(format_product_line(product) for product in products)
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT.format(product_list=product_list)},
            {"role": "user", "content": query},
        ]

        try:
            connector = ChatCompletionConnector(settings, transport=transport)
            content = connector.complete(messages)
        except ChatCompletionError as e:
            logger.error("AI search failed: %s", e)
            raise ProductSearchException(str(e)) from e

        logger.debug("AI response: %s", content)
        reply = parse_model_reply(content)

        matches = [p for p in products if str(p.id) in reply["product_ids"]]

        return {
            "products": matches,
            "explanation": reply["explanation"],
            "query": query,
        }

"""ProductSearchService 테스트 (chat-completion API는 MockTransport로 대체)"""

import json

import httpx
import pytest

from storefront.core.exceptions import ProductSearchException
from storefront.services.search_service import (
    ProductSearchService,
    format_price,
    format_product_line,
    parse_model_reply,
)


def chat_reply(content: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        json={"choices": [{"message": {"role": "assistant", "content": content}}]},
    )


@pytest.fixture
def catalog(categories, make_product):
    return [
        make_product(
            name="Traditional Shona Sculpture",
            description="Hand-carved stone sculpture",
            price=299.99,
            stock=5,
            category=categories["Art"],
        ),
        make_product(name="Ndebele Beaded Necklace", price=89.99, stock=12,
                     category=categories["Jewelry"], description="Colorful beads"),
        make_product(name="Zimbabwe Basket", price=50, stock=20),
    ]


class TestFormatting:
    def test_format_price(self):
        assert format_price(299.99) == "299.99"
        assert format_price(50.0) == "50"
        assert format_price(12.5) == "12.5"

    def test_format_product_line(self, catalog):
        assert format_product_line(catalog[0]) == (
            f"ID: {catalog[0].id}, Name: Traditional Shona Sculpture, "
            "Description: Hand-carved stone sculpture, Price: $299.99, "
            "Category: Art, Stock: 5"
        )

    def test_format_product_line_fallbacks(self, catalog):
        assert format_product_line(catalog[2]) == (
            f"ID: {catalog[2].id}, Name: Zimbabwe Basket, Description: No description, "
            "Price: $50, Category: No category, Stock: 20"
        )


class TestParseModelReply:
    def test_ids_become_strings(self):
        reply = parse_model_reply('{"product_ids": [1, "2"], "explanation": "Two matches"}')

        assert reply == {"product_ids": {"1", "2"}, "explanation": "Two matches"}

    @pytest.mark.parametrize(
        "content",
        ["not json", "[1, 2]", '{"explanation": "no ids"}', '{"product_ids": "1"}'],
    )
    def test_invalid_reply(self, content):
        with pytest.raises(ProductSearchException) as exc_info:
            parse_model_reply(content)

        assert exc_info.value.message == "Invalid response from AI"


class TestProductSearch:
    def test_search_success(self, test_db, settings, catalog):
        """Test: 일치 상품은 카탈로그 순서로, 모델 설명과 함께 반환"""
        sent = []

        def handler(request):
            sent.append(request)
            ids = [str(catalog[2].id), str(catalog[0].id)]
            return chat_reply(json.dumps({"product_ids": ids, "explanation": "Traditional pieces"}))

        result = ProductSearchService.search(
            "traditional gift", test_db, settings, transport=httpx.MockTransport(handler)
        )

        assert [p.name for p in result["products"]] == [
            "Traditional Shona Sculpture",
            "Zimbabwe Basket",
        ]
        assert result["explanation"] == "Traditional pieces"
        assert result["query"] == "traditional gift"

        request = sent[0]
        assert str(request.url) == "https://llm.test/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer test-llm-key"
        body = json.loads(request.content)
        assert body["model"] == "gpt-4o-mini"
        assert body["temperature"] == 0.3
        assert body["max_tokens"] == 500
        assert body["messages"][1] == {"role": "user", "content": "traditional gift"}
        system_prompt = body["messages"][0]["content"]
        assert "Sammy's Market" in system_prompt
        for product in catalog:
            assert format_product_line(product) in system_prompt

    def test_unknown_ids_ignored(self, test_db, settings, catalog):
        transport = httpx.MockTransport(
            lambda request: chat_reply('{"product_ids": ["999"], "explanation": "Nothing fits"}')
        )

        result = ProductSearchService.search("a car", test_db, settings, transport=transport)

        assert result["products"] == []
        assert result["explanation"] == "Nothing fits"

    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_blank_query(self, test_db, settings, query):
        """Test: 질의가 없으면 모델을 호출하지 않음"""
        calls = []
        transport = httpx.MockTransport(lambda request: calls.append(request))

        with pytest.raises(ProductSearchException):
            ProductSearchService.search(query, test_db, settings, transport=transport)

        assert calls == []

    def test_api_error(self, test_db, settings, catalog):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(429, json={"error": "rate limited"})
        )

        with pytest.raises(ProductSearchException) as exc_info:
            ProductSearchService.search("beads", test_db, settings, transport=transport)

        assert "429" in exc_info.value.message

    def test_unparseable_reply(self, test_db, settings, catalog):
        transport = httpx.MockTransport(lambda request: chat_reply("Here are some beads!"))

        with pytest.raises(ProductSearchException):
            ProductSearchService.search("beads", test_db, settings, transport=transport)

    def test_missing_api_key(self, test_db, settings, catalog):
        no_key = settings.model_copy(update={"llm_api_key": ""})

        with pytest.raises(ProductSearchException) as exc_info:
            ProductSearchService.search("beads", test_db, no_key)

        assert "LLM_API_KEY" in exc_info.value.message

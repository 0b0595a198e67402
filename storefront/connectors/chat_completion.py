"""
Chat-completion 커넥터

OpenAI 호환 /chat/completions 엔드포인트에 요청을 한 번 보내고
assistant 메시지 본문을 반환합니다.
"""

import logging
from typing import Dict, List, Optional

import httpx

from storefront.core.config import Settings

logger = logging.getLogger(__name__)


class ChatCompletionError(Exception):
    """chat-completion API 연결 실패 또는 오류 응답"""


class ChatCompletionConnector:
    """
    OpenAI 호환 chat-completion API 커넥터

    처리 내용:
    - Authorization 헤더
    - 요청 본문 (model, messages, temperature, max_tokens)
    - choices[0].message.content 추출
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        """
        커넥터 초기화

        Args:
            settings: 애플리케이션 설정 (llm_* 항목)
            transport: 사용자 지정 httpx transport (테스트에서는 httpx.MockTransport)
        """
        if not settings.llm_api_key:
            raise ChatCompletionError(
                "Chat-completion API key not configured. Set LLM_API_KEY"
            )

        self.settings = settings
        self.api_url = f"{settings.llm_base_url.rstrip('/')}/chat/completions"
        self.headers = {
            "Authorization": f"Bearer {settings.llm_api_key}",
            "Content-Type": "application/json",
        }
        self.transport = transport

    def complete(self, messages: List[Dict[str, str]]) -> str:
        """
        chat completion을 한 번 실행합니다.

        Args:
            messages: [{"role": "system" | "user" | "assistant", "content": str}, ...]

        Returns:
            assistant 메시지 내용

        Raises:
            ChatCompletionError: 네트워크 오류, 2xx가 아닌 상태 코드, 예상과 다른 응답 형식
        """
        payload = {
            "model": self.settings.llm_model,
            "messages": messages,
            "temperature": self.settings.llm_temperature,
            "max_tokens": self.settings.llm_max_tokens,
        }

        try:
            with httpx.Client(
                transport=self.transport, timeout=self.settings.llm_timeout_seconds
            ) as client:
                response = client.post(self.api_url, json=payload, headers=self.headers)
        except httpx.HTTPError as e:
            raise ChatCompletionError(f"Chat-completion request failed: {e}") from e

        if response.is_error:
            raise ChatCompletionError(
                f"Chat-completion API error ({response.status_code}): {response.text}"
            )

        try:
            return response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ChatCompletionError(
                "Unexpected chat-completion response format"
            ) from e

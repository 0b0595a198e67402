"""스토어프론트 로깅 설정"""

import logging

from storefront.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    애플리케이션 시작 시 root 로깅을 한 번 설정합니다.

    Args:
        settings: 애플리케이션 설정 (log_level 사용)
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("storefront").setLevel(level)

    # httpx는 모든 요청을 INFO로 남김
    logging.getLogger("httpx").setLevel(logging.WARNING)

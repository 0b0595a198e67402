"""결제 중 재고 차감 동안 유지하는 Redis 재고 락"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from redis import Redis

from storefront.core.config import Settings
from storefront.core.exceptions import LockAcquisitionException

logger = logging.getLogger(__name__)

# 키의 값이 내 lock id와 같을 때만 삭제 (만료 후 다른 프로세스가 잡은 락은 해제하지 않음)
RELEASE_SCRIPT = """
if redis.call("GET", KEYS[1]) == ARGV[1] then
    return redis.call("DEL", KEYS[1])
else
    return 0
end
"""


class InventoryService:
    """Redis SET NX EX 기반 상품별 비관적 락"""

    @staticmethod
    def _get_lock_key(product_id: int) -> str:
        """
        상품 락 키를 생성합니다.

        Args:
            product_id: 상품 ID

        Returns:
            락 키 문자열
        """
        return f"lock:stock:{product_id}"

    @staticmethod
    def _acquire_lock(
        product_id: int, redis: Redis, settings: Settings
    ) -> Optional[str]:
        """
        TTL을 걸고 상품 락 획득을 한 번 시도합니다.

        Args:
            product_id: 상품 ID
            redis: Redis 클라이언트
            settings: 애플리케이션 설정

        Returns:
            성공 시 lock id (UUID), 다른 곳에서 점유 중이면 None
        """
        lock_key = InventoryService._get_lock_key(product_id)
        lock_id = str(uuid.uuid4())

        # NX: 키가 없을 때만 설정, EX: TTL (비정상 종료 시 데드락 방지)
        acquired = redis.set(
            lock_key, lock_id, nx=True, ex=settings.lock_timeout_seconds
        )

        return lock_id if acquired else None

    @staticmethod
    def _release_lock(product_id: int, lock_id: str, redis: Redis) -> bool:
        """
        아직 내가 소유한 경우에만 상품 락을 해제합니다.

        Args:
            product_id: 상품 ID
            lock_id: _acquire_lock이 반환한 id
            redis: Redis 클라이언트

        Returns:
            락이 삭제되면 True
        """
        lock_key = InventoryService._get_lock_key(product_id)
        result = redis.eval(RELEASE_SCRIPT, 1, lock_key, lock_id)

        return bool(result)

    @staticmethod
    def acquire_lock(product_id: int, redis: Redis, settings: Settings) -> str:
        """
        고정 간격으로 재시도하며 상품 락을 획득합니다.

        Args:
            product_id: 상품 ID
            redis: Redis 클라이언트
            settings: 애플리케이션 설정 (재시도 횟수와 간격)

        Returns:
            lock id

        Raises:
            LockAcquisitionException: 모든 시도에서 락이 점유 중인 경우
        """
        max_retries = settings.lock_retry_attempts
        retry_delay = settings.lock_retry_delay_ms / 1000.0

        for attempt in range(max_retries):
            lock_id = InventoryService._acquire_lock(product_id, redis, settings)
            if lock_id is not None:
                return lock_id

            if attempt < max_retries - 1:
                time.sleep(retry_delay)

        logger.warning(
            "Stock lock for product %s still held after %s attempts",
            product_id,
            max_retries,
        )
        raise LockAcquisitionException(
            InventoryService._get_lock_key(product_id),
            f"Failed to acquire lock after {max_retries} retries",
        )

    @staticmethod
    @contextmanager
    def lock_products(
        product_ids: Iterable[int], redis: Redis, settings: Settings
    ) -> Iterator[list[int]]:
        """
        with 블록 동안 여러 상품의 락을 유지합니다.

        락은 상품 ID 오름차순으로 획득하므로 장바구니가 겹치는 두 결제가
        서로를 기다리지 않습니다. 획득 도중 실패해도 이미 잡은 락은
        블록을 벗어날 때 모두 해제됩니다.

        Args:
            product_ids: 락을 걸 상품 목록 (중복은 무시)
            redis: Redis 클라이언트
            settings: 애플리케이션 설정

        Yields:
            락이 걸린 상품 ID (정렬됨)

        Raises:
            LockAcquisitionException: 일부 락을 획득하지 못한 경우
        """
        ordered = sorted(set(product_ids))
        held: list[tuple[int, str]] = []
        try:
            for product_id in ordered:
                lock_id = InventoryService.acquire_lock(product_id, redis, settings)
                held.append((product_id, lock_id))
            yield ordered
        finally:
            for product_id, lock_id in reversed(held):
                InventoryService._release_lock(product_id, lock_id, redis)

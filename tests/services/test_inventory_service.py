"""InventoryService 재고 락 테스트 (실제 Redis 사용, 연결 불가 시 skip)"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from redis import Redis

from storefront.core.config import Settings
from storefront.core.exceptions import LockAcquisitionException
from storefront.services.inventory_service import InventoryService


def test_get_lock_key():
    """Test: 락 키 형식"""
    assert InventoryService._get_lock_key(7) == "lock:stock:7"


class TestStockLock:
    """Test: 단일 상품 락 테스트"""

    def test_acquire_lock_success(self, redis_client: Redis, settings: Settings):
        """Test: 락 키에 내 lock id가 저장됨"""
        lock_id = InventoryService._acquire_lock(1, redis_client, settings)

        assert isinstance(lock_id, str)
        assert redis_client.get("lock:stock:1") == lock_id
        assert 0 < redis_client.ttl("lock:stock:1") <= settings.lock_timeout_seconds

    def test_acquire_lock_already_locked(self, redis_client: Redis, settings: Settings):
        """Test: 점유 중인 락은 획득 불가"""
        redis_client.set("lock:stock:1", "existing-lock-id", ex=10)

        assert InventoryService._acquire_lock(1, redis_client, settings) is None

    def test_release_lock_success(self, redis_client: Redis, settings: Settings):
        lock_id = InventoryService._acquire_lock(1, redis_client, settings)

        assert InventoryService._release_lock(1, lock_id, redis_client) is True
        assert redis_client.get("lock:stock:1") is None

    def test_release_lock_wrong_id(self, redis_client: Redis, settings: Settings):
        """Test: Lua 스크립트는 다른 소유자의 락을 해제하지 않음"""
        InventoryService._acquire_lock(1, redis_client, settings)

        assert InventoryService._release_lock(1, "wrong-lock-id", redis_client) is False
        assert redis_client.get("lock:stock:1") is not None

    def test_release_lock_no_lock(self, redis_client: Redis):
        assert InventoryService._release_lock(1, "some-lock-id", redis_client) is False

    def test_lock_expiration(self, redis_client: Redis, settings: Settings):
        """Test: 해제되지 않은 락은 TTL로 풀림"""
        short = settings.model_copy(update={"lock_timeout_seconds": 1})

        assert InventoryService._acquire_lock(1, redis_client, short) is not None
        time.sleep(1.5)

        assert redis_client.get("lock:stock:1") is None

    def test_acquire_lock_gives_up(self, redis_client: Redis, settings: Settings):
        """Test: 다른 소유자가 락을 유지하면 재시도 소진 후 실패"""
        redis_client.set("lock:stock:1", "existing-lock-id", ex=10)

        with pytest.raises(LockAcquisitionException) as exc_info:
            InventoryService.acquire_lock(1, redis_client, settings)

        assert "lock:stock:1" in str(exc_info.value)


class TestLockProducts:
    """Test: 결제에서 쓰는 다중 상품 락 테스트"""

    def test_locks_held_inside_block(self, redis_client: Redis, settings: Settings):
        with InventoryService.lock_products([3, 1, 2, 3], redis_client, settings) as locked:
            assert locked == [1, 2, 3]
            for product_id in locked:
                assert redis_client.get(f"lock:stock:{product_id}") is not None

        for product_id in (1, 2, 3):
            assert redis_client.get(f"lock:stock:{product_id}") is None

    def test_locks_released_on_error(self, redis_client: Redis, settings: Settings):
        with pytest.raises(RuntimeError):
            with InventoryService.lock_products([1, 2], redis_client, settings):
                raise RuntimeError("checkout failed")

        assert redis_client.get("lock:stock:1") is None
        assert redis_client.get("lock:stock:2") is None

    def test_partial_acquisition_released(self, redis_client: Redis, settings: Settings):
        """Test: 점유 중인 락을 만나면 앞서 잡은 락을 반환"""
        redis_client.set("lock:stock:2", "other-checkout", ex=10)

        with pytest.raises(LockAcquisitionException):
            with InventoryService.lock_products([1, 2], redis_client, settings):
                pass

        assert redis_client.get("lock:stock:1") is None
        assert redis_client.get("lock:stock:2") == "other-checkout"

    def test_concurrent_holders_are_exclusive(self, redis_client: Redis, settings: Settings):
        """Test: 겹치는 상품 집합이 같은 락을 동시에 잡지 않음"""
        patient = settings.model_copy(
            update={"lock_retry_attempts": 500, "lock_retry_delay_ms": 5}
        )
        inside = {1: 0, 2: 0}
        overlaps = []
        guard = threading.Lock()

        def worker(product_ids):
            with InventoryService.lock_products(product_ids, redis_client, patient) as locked:
                with guard:
                    for product_id in locked:
                        inside[product_id] += 1
                        if inside[product_id] > 1:
                            overlaps.append(product_id)
                time.sleep(0.01)
                with guard:
                    for product_id in locked:
                        inside[product_id] -= 1

        carts = [[1, 2], [2, 1], [1], [2]] * 3
        with ThreadPoolExecutor(max_workers=6) as executor:
            for future in [executor.submit(worker, cart) for cart in carts]:
                future.result()

        assert overlaps == []
        assert redis_client.keys("lock:stock:*") == []

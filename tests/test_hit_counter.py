"""
Chirpy Backend — Hit Counter Unit Tests
========================================

What:  Increment/snapshot/reset contract and thread safety of HitCounter.
"""

from concurrent.futures import ThreadPoolExecutor

from chirpy.services.hit_counter import HitCounter


class TestHitCounter:

    def test_starts_at_zero(self):
        assert HitCounter().snapshot() == 0

    def test_increment_returns_new_value(self):
        counter = HitCounter()
        assert counter.increment() == 1
        assert counter.increment() == 2
        assert counter.snapshot() == 2

    def test_reset_returns_previous_value(self):
        counter = HitCounter()
        for _ in range(3):
            counter.increment()
        assert counter.reset() == 3
        assert counter.snapshot() == 0

    def test_counting_resumes_after_reset(self):
        counter = HitCounter()
        counter.increment()
        counter.reset()
        counter.increment()
        assert counter.snapshot() == 1

    def test_concurrent_increments_are_not_lost(self):
        """8 workers × 2000 increments must add up exactly."""
        counter = HitCounter()
        workers, per_worker = 8, 2000

        def hammer():
            for _ in range(per_worker):
                counter.increment()

        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(hammer) for _ in range(workers)]
            for future in futures:
                future.result()

        assert counter.snapshot() == workers * per_worker

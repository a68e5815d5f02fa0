import threading
import time

import pytest

from project_tracker_api.app.core.rwlock import ReadWriteLock


def _wait_until(predicate, timeout=2.0):
    deadline = time.time() + timeout
    while time.time() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    # Both readers must be inside the lock at once to pass the barrier.
    barrier = threading.Barrier(2, timeout=2)
    failures = []

    def reader():
        with lock.read():
            try:
                barrier.wait()
            except threading.BrokenBarrierError as exc:
                failures.append(exc)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert failures == []


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    acquired = threading.Event()

    def writer():
        with lock.write():
            acquired.set()

    lock.acquire_read()
    t = threading.Thread(target=writer)
    t.start()
    assert not acquired.wait(0.1)
    lock.release_read()
    assert acquired.wait(2)
    t.join(timeout=2)


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order = []

    def writer():
        with lock.write():
            order.append("writer")

    def reader():
        with lock.read():
            order.append("reader")

    lock.acquire_read()
    w = threading.Thread(target=writer)
    w.start()
    assert _wait_until(lambda: lock._writers_waiting == 1)
    r = threading.Thread(target=reader)
    r.start()
    time.sleep(0.05)
    assert order == []

    lock.release_read()
    w.join(timeout=2)
    r.join(timeout=2)
    assert order == ["writer", "reader"]


def test_lock_is_released_when_block_raises():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        with lock.write():
            raise RuntimeError("boom")
    with lock.read():
        pass
    with lock.write():
        pass


def test_unbalanced_release_is_an_error():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()

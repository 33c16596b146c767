import threading

from platformecs.safe_queue import SafeQueue


def test_fifo_order():
    queue = SafeQueue()
    for value in ("a", "b", "c"):
        queue.push(value)
    assert [queue.pop() for _ in range(3)] == ["a", "b", "c"]


def test_try_pop_on_empty_queue():
    queue = SafeQueue()
    assert queue.try_pop() is None
    assert len(queue) == 0


def test_try_pop_returns_oldest():
    queue = SafeQueue()
    queue.push(1)
    queue.push(2)
    assert queue.try_pop() == 1
    assert len(queue) == 1


def test_len_tracks_pushes_and_pops():
    queue = SafeQueue()
    queue.push("x")
    queue.push("y")
    assert len(queue) == 2
    queue.pop()
    assert len(queue) == 1


def test_pop_waits_for_producer():
    queue = SafeQueue()
    results = []
    consumer = threading.Thread(target=lambda: results.append(queue.pop()))
    consumer.start()
    queue.push("ready")
    consumer.join(timeout=5)
    assert not consumer.is_alive()
    assert results == ["ready"]


def test_concurrent_producers_lose_nothing():
    queue = SafeQueue()
    producers = [
        threading.Thread(target=lambda base=base: [queue.push(base * 100 + i) for i in range(50)])
        for base in range(4)
    ]
    for producer in producers:
        producer.start()
    for producer in producers:
        producer.join()
    drained = []
    while (value := queue.try_pop()) is not None:
        drained.append(value)
    assert sorted(drained) == sorted(base * 100 + i for base in range(4) for i in range(50))
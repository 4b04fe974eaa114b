import threading

from scramblematch.models.scrambles import ScrambleSetIdAllocator


def test_ids_start_at_one_and_increase():
    allocator = ScrambleSetIdAllocator()
    assert [allocator.next_id() for _ in range(3)] == [1, 2, 3]
    assert allocator.last_issued == 3


def test_new_allocator_starts_over():
    first = ScrambleSetIdAllocator()
    first.next_id()
    first.next_id()
    assert ScrambleSetIdAllocator().next_id() == 1


def test_allocator_is_an_iterator():
    allocator = ScrambleSetIdAllocator(start=10)
    assert next(allocator) == 10
    assert next(iter(allocator)) == 11


def test_no_duplicates_across_threads():
    allocator = ScrambleSetIdAllocator()
    issued = []
    lock = threading.Lock()

    def worker():
        ids = [allocator.next_id() for _ in range(500)]
        with lock:
            issued.extend(ids)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(issued) == 4000
    assert sorted(issued) == list(range(1, 4001))


def test_reserved_ids_are_skipped():
    allocator = ScrambleSetIdAllocator()
    allocator.next_id()
    allocator.reserve_through(5)
    assert allocator.next_id() == 6

    allocator.reserve_through(2)
    assert allocator.next_id() == 7

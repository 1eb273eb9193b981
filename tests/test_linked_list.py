import threading

from lobook.linked_list import ConcurrentList


def test_insert_prepends():
    items = ConcurrentList()
    for value in [10, 20, 30]:
        items.insert(value)
    assert list(items) == [30, 20, 10]
    assert len(items) == 3


def test_format_matches_iteration():
    items = ConcurrentList()
    for value in [10, 20, 30]:
        items.insert(value)
    assert items.format() == " ".join(str(v) for v in items)
    assert items.format().split() == ["30", "20", "10"]


def test_empty_list():
    items = ConcurrentList()
    assert list(items) == []
    assert len(items) == 0
    assert items.format() == ""


def test_two_threads_keep_all_values_and_their_order():
    items = ConcurrentList()
    first = [i * 10 for i in range(1, 6)]
    second = [i * 100 for i in range(1, 6)]

    def insert_all(values):
        for value in values:
            items.insert(value)

    threads = [
        threading.Thread(target=insert_all, args=(first,)),
        threading.Thread(target=insert_all, args=(second,)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    result = list(items)
    assert sorted(result) == sorted(first + second)
    assert [v for v in result if v in first] == list(reversed(first))
    assert [v for v in result if v in second] == list(reversed(second))


def test_many_threads_lose_nothing():
    items = ConcurrentList()
    per_thread = 500
    thread_count = 8

    def insert_block(base):
        for offset in range(per_thread):
            items.insert(base + offset)

    threads = [
        threading.Thread(target=insert_block, args=(n * per_thread,))
        for n in range(thread_count)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(items) == list(range(per_thread * thread_count))
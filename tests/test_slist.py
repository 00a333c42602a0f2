import pytest

from calgkit.slist import SList, SListEntry, SListIterator


def int_compare(a, b):
    return (a > b) - (a < b)


def int_equal(a, b):
    return a == b


def make_list():
    slist = SList()
    for value in ("one", "two", "three", "four"):
        slist.append(value)
    return slist


def test_append_order():
    slist = make_list()
    assert len(slist) == 4
    assert [slist.nth_data(i) for i in range(4)] == ["one", "two", "three", "four"]


def test_append_returns_entry():
    slist = SList()
    entry = slist.append(7)
    assert isinstance(entry, SListEntry)
    assert entry.data == 7
    assert slist.head is entry


def test_prepend_order():
    slist = SList()
    for value in ("one", "two", "three", "four"):
        slist.prepend(value)
    assert slist.to_array() == ["four", "three", "two", "one"]


def test_constructor_from_iterable():
    slist = SList([1, 2, 3])
    assert list(slist) == [1, 2, 3]
    assert len(SList()) == 0


def test_next_walk():
    slist = make_list()
    entry = slist.head
    seen = []
    while entry is not None:
        seen.append(entry.data)
        entry = entry.next
    assert seen == ["one", "two", "three", "four"]


def test_set_data():
    slist = make_list()
    entry = slist.nth_entry(1)
    entry.data = "changed"
    assert slist.nth_data(1) == "changed"


def test_nth_entry():
    slist = make_list()
    assert slist.nth_entry(0).data == "one"
    assert slist.nth_entry(3).data == "four"
    assert slist.nth_entry(4) is None
    assert slist.nth_entry(400) is None
    assert slist.nth_entry(-1) is None


def test_nth_data_out_of_range():
    slist = make_list()
    with pytest.raises(IndexError):
        slist.nth_data(4)
    with pytest.raises(IndexError):
        slist.nth_data(400)


def test_length():
    slist = make_list()
    assert len(slist) == 4
    slist.prepend("zero")
    assert len(slist) == 5
    assert len(SList()) == 0


def test_remove_entry():
    slist = make_list()
    assert slist.remove_entry(slist.nth_entry(2)) is True
    assert slist.to_array() == ["one", "two", "four"]
    assert slist.remove_entry(slist.nth_entry(0)) is True
    assert slist.to_array() == ["two", "four"]
    assert slist.remove_entry(None) is False
    assert SList().remove_entry(None) is False


def test_remove_entry_not_in_list():
    slist = make_list()
    stranger = SListEntry("one")
    assert slist.remove_entry(stranger) is False
    assert len(slist) == 4


def test_remove_only_and_last_entry():
    slist = SList()
    entry = slist.append("one")
    assert slist.remove_entry(entry) is True
    assert slist.head is None

    slist = make_list()
    assert slist.remove_entry(slist.nth_entry(3)) is True
    assert slist.to_array() == ["one", "two", "three"]


def test_remove_data():
    entries = [89, 4, 23, 42, 4, 16, 15, 4, 8, 99, 50, 30, 4]
    slist = SList()
    for value in entries:
        slist.prepend(value)

    assert slist.remove_data(int_equal, 0) == 0
    assert slist.remove_data(int_equal, 56) == 0

    assert slist.remove_data(int_equal, 8) == 1
    assert len(slist) == len(entries) - 1

    assert slist.remove_data(int_equal, 4) == 4
    assert len(slist) == len(entries) - 5

    assert slist.remove_data(int_equal, 89) == 1
    assert len(slist) == len(entries) - 6
    assert 4 not in slist.to_array()


def test_sort():
    entries = [89, 4, 23, 42, 4, 16, 15, 4, 8, 99, 50, 30, 4]
    slist = SList()
    for value in entries:
        slist.prepend(value)
    slist.sort(int_compare)
    assert len(slist) == len(entries)
    assert slist.to_array() == sorted(entries)


def test_sort_keeps_entries():
    slist = SList([3, 1, 2])
    originals = {id(entry) for entry in slist.entries()}
    slist.sort(int_compare)
    assert {id(entry) for entry in slist.entries()} == originals
    assert slist.to_array() == [1, 2, 3]


def test_sort_empty():
    slist = SList()
    slist.sort(int_compare)
    assert slist.head is None


def test_find_data():
    entries = [89, 23, 42, 16, 15, 4, 8, 99, 50, 30]
    slist = SList(entries)
    for value in entries:
        found = slist.find_data(int_equal, value)
        assert found is not None
        assert found.data == value
    assert slist.find_data(int_equal, 0) is None
    assert slist.find_data(int_equal, 56) is None


def test_to_array():
    slist = make_list()
    assert slist.to_array() == ["one", "two", "three", "four"]


def test_iterate_with_removal():
    slist = SList()
    for _ in range(50):
        slist.prepend("a")

    iterator = slist.iterate()
    assert isinstance(iterator, SListIterator)
    iterator.remove()  # before the first value: no effect

    counter = 0
    while iterator.has_more():
        assert next(iterator) == "a"
        counter += 1
        if counter % 2 == 0:
            iterator.remove()
            iterator.remove()

    with pytest.raises(StopIteration):
        next(iterator)
    iterator.remove()

    assert counter == 50
    assert len(slist) == 25


def test_iterate_empty():
    iterator = SList().iterate()
    assert iterator.has_more() is False
    assert list(iterator) == []


def test_iterate_for_loop():
    slist = SList([1, 2, 3, 4])
    iterator = slist.iterate()
    for value in iterator:
        if value % 2 == 0:
            iterator.remove()
    assert slist.to_array() == [1, 3]


def test_iterate_bad_remove():
    slist = SList()
    for value in range(49):
        slist.prepend(value)

    iterator = slist.iterate()
    visited = []
    while iterator.has_more():
        value = next(iterator)
        visited.append(value)
        if value % 2 == 0:
            assert slist.remove_data(int_equal, value) != 0
            iterator.remove()

    assert sorted(visited) == list(range(49))
    assert all(value % 2 == 1 for value in slist)
    assert len(slist) == 24
from app.utils.embedded_list import find_entry, new_entry, prepend_entry, remove_entry
from app.utils.identifiers import is_valid_id, new_id


def test_new_entry_gets_unique_id():
    first = new_entry(user_id="u1")
    second = new_entry(user_id="u1")
    assert first["user_id"] == "u1"
    assert first["id"] != second["id"]
    assert is_valid_id(first["id"])


def test_prepend_puts_entry_first_without_mutating():
    original = [{"id": "a"}, {"id": "b"}]
    result = prepend_entry(original, {"id": "c"})
    assert [e["id"] for e in result] == ["c", "a", "b"]
    assert [e["id"] for e in original] == ["a", "b"]


def test_prepend_on_empty_or_none():
    assert prepend_entry(None, {"id": "x"}) == [{"id": "x"}]
    assert prepend_entry([], {"id": "x"}) == [{"id": "x"}]


def test_find_entry_by_id_and_by_key():
    entries = [{"id": "1", "user_id": "u1"}, {"id": "2", "user_id": "u2"}]
    assert find_entry(entries, "2") is entries[1]
    assert find_entry(entries, "u1", key="user_id") is entries[0]
    assert find_entry(entries, "missing") is None
    assert find_entry(None, "1") is None


def test_find_entry_is_exact_match():
    entries = [{"id": "1", "user_id": "ABC"}]
    assert find_entry(entries, "abc", key="user_id") is None


def test_remove_entry_keeps_order_of_the_rest():
    entries = [{"id": "1"}, {"id": "2"}, {"id": "3"}, {"id": "4"}]
    result = remove_entry(entries, entries[1])
    assert [e["id"] for e in result] == ["1", "3", "4"]
    # 原本的 list 不變
    assert len(entries) == 4


def test_remove_entry_removes_only_that_object():
    twin_a = {"id": "same"}
    twin_b = {"id": "same"}
    result = remove_entry([twin_a, twin_b], twin_b)
    assert len(result) == 1
    assert result[0] is twin_a


def test_is_valid_id():
    assert is_valid_id(new_id())
    assert not is_valid_id("not-an-id")
    assert not is_valid_id("123")

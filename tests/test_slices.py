import pytest

from vago import slices
from vago.slices import WrappedIdx


def _eq(x, y):
    return x == y


def _even(x):
    return x % 2 == 0


@pytest.mark.parametrize(
    "payload, predicate, expected",
    [
        ([], lambda i: True, -1),
        ([1, 2, 3], lambda i: i == 1, 0),
        ([1, 2, 3], lambda i: i == 3, 2),
        ([73, 30, 5], lambda i: i == 42, -1),
    ],
)
def test_index_of(payload, predicate, expected):
    assert slices.index_of(payload, predicate) == expected


def test_index_of_example():
    numbers = [10, 20, 30, 40, 50]
    assert slices.index_of(numbers, lambda n: n > 25) == 2
    assert slices.index_of(numbers, lambda n: n > 100) == -1


@pytest.mark.parametrize(
    "payload, target, expected",
    [
        ([], 1, False),
        ([1, 2, 3], 1, True),
        ([1, 2, 3], 3, True),
        ([73, 30, 5], 3, False),
    ],
)
def test_contains_and_includes(payload, target, expected):
    assert slices.contains(payload, lambda x: x == target) is expected
    assert slices.includes(payload, target) is expected


def test_contains_example():
    numbers = [1, 2, 3, 4, 5]
    assert slices.contains(numbers, lambda n: n > 3) is True
    assert slices.contains(numbers, lambda n: n < 0) is False


def test_some_any_all():
    words = ["hello", "world", "go", "programming"]
    assert slices.some(words, lambda w: len(w) < 4) is True
    numbers = [1, 2, 3, 4, 5]
    assert slices.any_match(numbers, _even) is True
    assert slices.any_match(numbers, lambda n: n > 10) is False
    assert slices.all_match(numbers, lambda n: n > 0) is True
    assert slices.all_match(numbers, _even) is False


@pytest.mark.parametrize(
    "payload, expected, predicate",
    [
        ([], [], lambda i: True),
        ([1, 2, 3], [2], _even),
        ([1, 2, 3], [], lambda i: i > 10),
    ],
)
def test_filter_and_filter_in_place(payload, expected, predicate):
    assert slices.equals(expected, slices.filter_items(list(payload), predicate), _eq)
    assert slices.equals(expected, slices.filter_in_place(list(payload), predicate), _eq)


def test_filter_example():
    numbers = list(range(1, 11))
    assert slices.filter_items(numbers, _even) == [2, 4, 6, 8, 10]
    assert numbers == list(range(1, 11))


def test_filter_in_place_mutates():
    numbers = [1, 2, 3, 4, 5, 6]
    result = slices.filter_in_place(numbers, _even)
    assert result == [2, 4, 6]
    assert numbers == [2, 4, 6]


@pytest.mark.parametrize(
    "payload, expected, fn",
    [
        ([], [], lambda i: None),
        ([1, 2, 3], [4], lambda i: i * i if i % 2 == 0 else None),
        ([1, 2, 3], [], lambda i: None),
    ],
)
def test_filter_map(payload, expected, fn):
    assert slices.filter_map(payload, fn) == expected


def test_filter_map_example():
    numbers = [1, 2, 3, 4, 5, 6]
    assert slices.filter_map(numbers, lambda n: n * n if n % 2 == 0 else None) == [4, 16, 36]


def test_filter_map_tuple_example():
    numbers = [1, 2, 3, 4, 5]
    result = slices.filter_map_tuple(numbers, lambda n: (n * n, True) if n % 2 == 0 else (0, False))
    assert result == [4, 16]


def test_map_items_example():
    assert slices.map_items([1, 2, 3, 4, 5], lambda n: n * n) == [1, 4, 9, 16, 25]


def test_map_in_place_example():
    numbers = [1, 2, 3, 4, 5]
    result = slices.map_in_place(numbers, lambda n: n * 2)
    assert result == [2, 4, 6, 8, 10]
    assert numbers == [2, 4, 6, 8, 10]


@pytest.mark.parametrize("payload, expected", [([], 0), ([1], 1), ([1, 2, 3], 6)])
def test_reduce(payload, expected):
    assert slices.reduce(payload, lambda x, y: x + y) == expected


def test_reduce_example():
    assert slices.reduce([1, 2, 3, 4, 5], lambda a, b: a + b) == 15


def test_fold_examples():
    assert slices.fold([1, 2, 3, 4, 5], lambda a, b: a + b, 10) == 25
    words = ["Hello", "World", "from", "Go"]
    result = slices.fold(
        words, lambda acc, w: "Greeting: " + w if acc == "" else acc + " " + w, ""
    )
    assert result == "Greeting: Hello World from Go"


def test_fold_empty_returns_initial():
    assert slices.fold([], lambda a, b: a + b, 7) == 7


@pytest.mark.parametrize(
    "payload, start, stop, expected",
    [
        ([], 0, 0, []),
        ([1], 0, 0, []),
        ([1, 2], 0, 0, [2]),
        ([1, 2], 1, 1, [1]),
        ([1, 2], 0, 1, []),
        ([1, 2], 1, 0, [1]),
        ([1, 2], 3, 0, [1]),
        ([1, 2], 0, 3, []),
        ([1, 2], -1, 0, [2]),
        ([1, 2], 0, -1, [2]),
        ([1, 2, 3, 4], 0, 4, []),
        ([1, 2, 3, 4, 5], 1, 3, [1, 5]),
    ],
)
def test_cut(payload, start, stop, expected):
    assert slices.cut(payload, start, stop) == expected


def test_append_and_append_vector():
    numbers = [1, 2, 3]
    assert slices.append(numbers, 4) == [1, 2, 3, 4]
    assert slices.append_vector(numbers, [4, 5, 6]) == [1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize(
    "payload, idx, expected",
    [
        ([], 0, []),
        ([1], 0, []),
        ([1], -1, [1]),
        ([1], 3, [1]),
        ([1, 2], 0, [2]),
        ([1, 2, 3, 4, 5], 2, [1, 2, 5, 4]),
    ],
)
def test_delete(payload, idx, expected):
    assert slices.delete(payload, idx) == expected


@pytest.mark.parametrize(
    "payload, idx, expected",
    [
        ([], 0, []),
        ([1], 0, []),
        ([1], -1, [1]),
        ([1], 3, [1]),
        ([1, 2], 0, [2]),
        ([1, 2, 3, 4], 0, [2, 3, 4]),
        ([1, 2, 3, 4, 5], 2, [1, 2, 4, 5]),
    ],
)
def test_delete_order(payload, idx, expected):
    assert slices.delete_order(payload, idx) == expected


@pytest.mark.parametrize(
    "payload, expected",
    [
        ([], None),
        ([2], 2),
        ([2, 1, 1, 1, 1], 2),
        ([1, 1, 1, 1, 2], 2),
        ([1, 1, 2, 1, 1, 4], 2),
    ],
)
def test_find(payload, expected):
    assert slices.find(payload, _even) == expected


def test_find_example():
    names = ["Alice", "Bob", "Charlie", "David"]
    assert slices.find(names, lambda n: n.startswith("C")) == "Charlie"


def test_find_idx_example():
    numbers = [10, 20, 30, 40, 50]
    assert slices.find_idx(numbers, lambda n: n > 25) == (30, 2)
    assert slices.find_idx(numbers, lambda n: n > 100) == (None, -1)


@pytest.mark.parametrize(
    "payload, expected, expected_rest",
    [
        ([], None, []),
        ([2], 2, []),
        ([2, 1, 1, 1, 1], 2, [1, 1, 1, 1]),
        ([1, 1, 1, 1, 2], 2, [1, 1, 1, 1]),
        ([1, 1, 2, 1, 1, 4], 2, [1, 1, 4, 1, 1]),
        ([1, 2, 3, 4, 5], 2, [1, 5, 3, 4]),
    ],
)
def test_extract(payload, expected, expected_rest):
    assert slices.extract(payload, _even) == expected
    assert payload == expected_rest


def test_extract_idx_example():
    numbers = [1, 2, 3, 4, 5]
    assert slices.extract_idx(numbers, 2) == 3
    assert numbers == [1, 2, 5, 4]


@pytest.mark.parametrize("idx", [-1, 5])
def test_extract_idx_out_of_range(idx):
    numbers = [1, 2, 3, 4, 5]
    with pytest.raises(IndexError):
        slices.extract_idx(numbers, idx)
    assert numbers == [1, 2, 3, 4, 5]


def test_pop():
    payload = [1, 2]
    assert slices.pop(payload) == 2
    assert slices.pop(payload) == 1
    with pytest.raises(IndexError):
        slices.pop(payload)


def test_pop_example():
    numbers = [1, 2, 3, 4, 5]
    assert slices.pop(numbers) == 5
    assert numbers == [1, 2, 3, 4]


def test_peek_example():
    numbers = [1, 2, 3, 4, 5]
    assert slices.peek(numbers, 2) == 3
    assert numbers == [1, 2, 3, 4, 5]
    with pytest.raises(IndexError):
        slices.peek(numbers, 5)
    with pytest.raises(IndexError):
        slices.peek([], 0)


def test_push_front_and_unshift():
    numbers = [2, 3, 4]
    assert slices.push_front(numbers, 1) == [1, 2, 3, 4]
    assert slices.unshift(numbers, 1) == [1, 2, 3, 4]
    assert numbers == [2, 3, 4]


def test_pop_front_and_shift():
    numbers = [1, 2, 3, 4, 5]
    assert slices.pop_front(numbers) == 1
    assert numbers == [2, 3, 4, 5]
    assert slices.shift(numbers) == 2
    assert numbers == [3, 4, 5]
    with pytest.raises(IndexError):
        slices.shift([])


@pytest.mark.parametrize(
    "payload, item, idx, expected",
    [
        (None, 1, 0, [1]),
        ([], 1, 0, [1]),
        ([2], 1, 0, [1, 2]),
        ([2], 1, 1, [2, 1]),
        ([1, 3], 2, 1, [1, 2, 3]),
        ([1, 3], 2, -1, [1, 3]),
        ([1, 3], 2, 3, [1, 3]),
        ([1, 2, 4, 5], 3, 2, [1, 2, 3, 4, 5]),
    ],
)
def test_insert(payload, item, idx, expected):
    assert slices.insert(payload, item, idx) == expected


@pytest.mark.parametrize(
    "payload, more, idx, expected",
    [
        (None, [1], 0, [1]),
        ([], [1, 2], 0, [1, 2]),
        ([2], [1, 2], 0, [1, 2, 2]),
        ([2], [3, 5], 1, [2, 3, 5]),
        ([1, 3], [2, 4], 1, [1, 2, 4, 3]),
        ([1, 3], [], 1, [1, 3]),
        ([1, 3], [], -1, [1, 3]),
        ([1, 3], [], 3, [1, 3]),
        ([1, 2, 5, 6], [3, 4], 2, [1, 2, 3, 4, 5, 6]),
    ],
)
def test_insert_vector(payload, more, idx, expected):
    assert slices.insert_vector(payload, more, idx) == expected


def test_copy():
    original = [1, 2, 3]
    duplicate = slices.copy(original)
    assert duplicate == original
    duplicate.append(4)
    assert original == [1, 2, 3]
    assert slices.copy(None) is None


def test_equals_example():
    assert slices.equals([1, 2, 3], [1, 2, 3], _eq) is True
    assert slices.equals([1, 2, 3], [1, 2, 4], _eq) is False
    assert slices.equals([1, 2], [1, 2, 3], _eq) is False


def test_to_map_example():
    word_map = slices.to_map(["apple", "banana", "cherry"], lambda w: w[0])
    assert word_map["a"] == "apple"
    assert word_map["b"] == "banana"


def test_to_map_idx_example():
    result = slices.to_map_idx(["apple", "banana", "cherry"], lambda f: f)
    assert result["apple"] == WrappedIdx("apple", 0)
    assert result["banana"] == WrappedIdx("banana", 1)


def test_for_each_example():
    seen = []
    slices.for_each([1, 2, 3, 4, 5], seen.append)
    assert seen == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "payload, expected",
    [
        ([1, 2, 3, 4, 5], [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)]),
        ([5, 6, 7], [(0, 5)]),
        ([], []),
    ],
)
def test_range_each_stops_after_five(payload, expected):
    seen = []

    def visit(n, idx):
        seen.append((idx, n))
        return n != 5

    slices.range_each(payload, visit)
    assert slices.equals(seen, expected, _eq) is True
    assert seen == expected


@pytest.mark.parametrize(
    "payload, expected",
    [
        ([1, 2, 3], [1, 2]),
        ([7], [7]),
        ([4, 5, 6, 8], [4, 5]),
    ],
)
def test_range_each_early_return(payload, expected):
    calls = []

    def visit(x, i):
        calls.append(x)
        return i % 2 == 0

    slices.range_each(payload, visit)
    assert slices.equals(calls, expected, _eq) is True
    assert calls == expected
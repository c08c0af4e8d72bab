import suite
from kevy import C, CursorIterator, CursorState, empty

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


mixed = {0: 'a', 'b': 'c', 1: 'test'}


@test("for loop yields values in order")
def test_for_loop():
    seen = []
    for value in C([10, 20, 30]):
        seen.append(value)
    assert_equal(seen, [10, 20, 30])


@test("items yields key/value pairs")
def test_items():
    assert_equal(list(C(mixed).items()), [(0, 'a'), ('b', 'c'), (1, 'test')])


@test("nested iteration over the same collection is independent")
def test_nested_iteration():
    data = C(['x', 'y'])
    pairs = [(outer, inner) for outer in data for inner in data]
    assert_equal(pairs, [('x', 'x'), ('x', 'y'), ('y', 'x'), ('y', 'y')])


@test("explicit protocol walks keys and values")
def test_explicit_protocol():
    c = C(mixed)
    walked = []
    c.rewind()
    while c.valid():
        walked.append((c.key(), c.current()))
        c.next()
    assert_equal(walked, list(mixed.items()))
    assert_that(not c.valid(), "should be exhausted")


@test("current and key before rewind take a snapshot implicitly")
def test_lazy_snapshot():
    c = C({'first': 1, 'second': 2})
    assert_equal(c.cursor.state, CursorState.UNINITIALIZED)
    assert_equal(c.current(), 1)
    assert_equal(c.key(), 'first')
    assert_equal(c.cursor.state, CursorState.POSITIONED)


@test("reads do not advance the cursor")
def test_reads_do_not_advance():
    c = C(['a', 'b'])
    c.rewind()
    c.current()
    c.key()
    c.current()
    assert_equal(c.key(), 0)
    c.next()
    assert_equal(c.current(), 'b')


@test("exhausted cursor reads None and stays exhausted")
def test_exhausted():
    c = C(['only'])
    c.rewind()
    c.next()
    assert_equal(c.cursor.state, CursorState.EXHAUSTED)
    assert_that(c.current() is None, "current should be None")
    assert_that(c.key() is None, "key should be None")
    c.next()
    assert_equal(c.cursor.state, CursorState.EXHAUSTED)


@test("rewind on an empty collection is immediately exhausted")
def test_empty_rewind():
    c = empty()
    c.rewind()
    assert_equal(c.cursor.state, CursorState.EXHAUSTED)
    assert_that(not c.valid(), "nothing to read")
    assert_equal(list(empty()), [])


@test("set_data does not disturb a running iteration")
def test_snapshot_isolation():
    c = C([1, 2, 3])
    c.rewind()
    c.next()
    c.set_data(['x'])
    remaining = []
    while c.valid():
        remaining.append(c.current())
        c.next()
    assert_equal(remaining, [2, 3])
    c.rewind()
    assert_equal(c.current(), 'x')


@test("editing the live mapping does not disturb a python iterator")
def test_python_iterator_isolation():
    c = C({'a': 1, 'b': 2})
    iterator = iter(c)
    assert_equal(next(iterator), 1)
    c.get_data()['c'] = 3
    assert_equal(list(iterator), [2])


@test("python iteration does not move the attached cursor")
def test_iteration_independent_of_cursor():
    c = C(['a', 'b', 'c'])
    c.rewind()
    c.next()
    assert_equal(list(c), ['a', 'b', 'c'])
    assert_equal(c.current(), 'b')


@test("standalone cursor drains into pairs")
def test_standalone_cursor():
    cursor = CursorIterator(lambda: {'k': 'v', 2: 'w'})
    assert_equal(list(cursor.pairs()), [('k', 'v'), (2, 'w')])
    assert_equal(cursor.state, CursorState.EXHAUSTED)
    cursor.rewind()
    assert_equal(list(cursor), ['v', 'w'])


if __name__ == "__main__":
    suite.main("kevy cursor test suite")

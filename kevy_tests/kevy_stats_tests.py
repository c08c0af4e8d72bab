import suite
from dataclasses import dataclass
from dgen import from_schema
from kevy import Collection, C, empty, TypeMismatch

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


@dataclass
class Customer:
    id: int
    age: int


# test data schemas
person_schema = {
    'id': {'_qen_provider': 'sequence'},
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'address': {
        'city': {'_qen_provider': 'choice', 'from': ['ny', 'la', 'chi']},
        'zip': ('pyint', {'min_value': 10000, 'max_value': 99999})
    }
}

customers = Collection([Customer(1, -2), Customer(2, 2), Customer(3, 42)])
records = Collection([{'id': 1, 'age': -2}, {'id': 2, 'age': 2}, {'id': 3, 'age': 42}])


# sum() tests

@test("sum of raw values")
def test_sum_raw():
    assert_equal(C([1, 2, 3, 4]).sum(), 10)
    assert_equal(C({'a': 1.5, 'b': 2.5}).sum(), 4.0)


@test("sum of an object attribute")
def test_sum_attribute():
    assert_equal(customers.sum('id'), 6)
    assert_equal(customers.sum('age'), 42)


@test("sum of a record field")
def test_sum_field():
    assert_equal(records.sum('age'), 42)


@test("sum with an accessor function")
def test_sum_accessor():
    assert_equal(customers.sum(lambda m: m.id * 10), 60)


@test("sum treats missing fields as zero")
def test_sum_missing_field():
    data = C([{'n': 1}, {}, {'n': 4}])
    assert_equal(data.sum('n'), 5)


@test("sum of empty collection is zero")
def test_sum_empty():
    assert_equal(empty().sum(), 0)
    assert_equal(Collection([]).sum('id'), 0)
    assert_equal(Collection([]).sum('age'), 0)


@test("sum keeps integer precision for large values")
def test_sum_big_ints():
    big = 2 ** 62
    assert_equal(C([big, big, big]).sum(), 3 * big)


@test("sum folds floats left to right")
def test_sum_float_fold():
    assert_equal(C([0.1] * 10).sum(), 0.9999999999999999)
    assert_equal(C({'a': 1.5, 'b': 2.5}).sum(), 4.0)
    assert_equal(C([{'w': 0.1}] * 3).sum('w'), 0.30000000000000004)


@test("sum of non-numeric values raises TypeMismatch")
def test_sum_non_numeric():
    with assert_raises(TypeMismatch):
        C([1, 'two']).sum()


@test("sum over generated records matches a manual total")
def test_sum_generated():
    people = from_schema(person_schema, seed=42).take(25)
    expected = 0
    for person in people:
        expected += person['age']
    assert_equal(people.sum('age'), expected)


@test("sum over a dotted field path")
def test_sum_dotted():
    people = from_schema(person_schema, seed=7).take(10)
    expected = sum(p['address']['zip'] for p in people)
    assert_equal(people.sum('address.zip'), expected)


# min() / max() tests

@test("min and max of an attribute")
def test_min_max_attribute():
    assert_equal(customers.min('id'), 1)
    assert_equal(customers.min('age'), -2)
    assert_equal(customers.max('id'), 3)
    assert_equal(customers.max('age'), 42)


@test("min and max of raw values")
def test_min_max_raw():
    data = C({'x': 5, 'y': -1, 'z': 3})
    assert_equal(data.min(), -1)
    assert_equal(data.max(), 5)


@test("min and max of empty collection are zero")
def test_min_max_empty():
    assert_equal(Collection([]).min('id'), 0)
    assert_equal(Collection([]).max('age'), 0)
    assert_equal(empty().min(), 0)
    assert_equal(empty().max(), 0)


@test("min and max of a single value")
def test_min_max_single():
    assert_equal(C([-7]).min(), -7)
    assert_equal(C([-7]).max(), -7)


@test("min and max work on strings")
def test_min_max_strings():
    words = C(['pear', 'apple', 'zucchini'])
    assert_equal(words.min(), 'apple')
    assert_equal(words.max(), 'zucchini')


@test("max of incomparable values raises TypeMismatch")
def test_max_incomparable():
    with assert_raises(TypeMismatch):
        C([1, 'a']).max()
    with assert_raises(TypeError):
        C([{'a': 1}, {'b': 2}]).min()


@test("min and max over generated records")
def test_min_max_generated():
    people = from_schema(person_schema, seed=99).take(30)
    ages = people.map(lambda p: p['age']).to.list()
    assert_equal(people.min('age'), min(ages))
    assert_equal(people.max('age'), max(ages))
    assert_that(18 <= people.min('age') <= people.max('age') <= 65, "ages should stay in schema range")


if __name__ == "__main__":
    suite.main("kevy aggregate operations test suite")

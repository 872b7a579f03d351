import math
import suite
from records import from_schema, person_schema
from slicy import (
    difference, difference_by, difference_with,
    intersection, intersection_by, intersection_with,
    union, union_by, union_with,
    uniq, uniq_by, uniq_with,
    xor, xor_by, xor_with,
    without, pull, pull_all, pull_all_by, pull_all_with, pull_at,
    S, empty
)

test = suite.test
assert_that = suite.assert_that

people = from_schema(person_schema, 20, seed=42)
by_id = lambda p: p['id']
floor = math.floor
near = lambda x, y: abs(x - y) < 0.5


# --- difference ---

@test("difference keeps items missing from the other sequence")
def test_difference_basic():
    assert_that(difference([2, 1], [2, 3]) == [1], "only 1 is not in [2, 3]")


@test("difference checks every other sequence and keeps duplicates")
def test_difference_many():
    result = difference([1, 1, 2, 3, 4, 4], [2], [4, 9])
    assert_that(result == [1, 1, 3], f"expected [1, 1, 3], got {result}")
    assert_that(difference([1, 2]) == [1, 2], "no others removes nothing")
    assert_that(difference([], [1]) == [], "empty stays empty")


@test("difference result shares nothing with the excluded sequence")
def test_difference_disjoint():
    a, b = [5, 3, 8, 3, 1, 9], [3, 9, 10]
    assert_that(all(x not in b for x in difference(a, b)), "no element of b should survive")


@test("difference and intersection together cover the unique elements")
def test_difference_intersection_cover():
    a, b = [7, 2, 7, 4, 1, 2], [2, 9, 1]
    covered = union(difference(a, b), intersection(a, b))
    assert_that(sorted(covered) == sorted(uniq(a)), f"expected the values of {uniq(a)}, got {covered}")


@test("difference_by compares iteratee results")
def test_difference_by():
    assert_that(difference_by([2.1, 1.2], floor, [2.3, 3.4]) == [1.2], "floor(2.1) == floor(2.3)")
    assert_that(difference_by([{'x': 2}, {'x': 1}], lambda o: o['x'], [{'x': 1}]) == [{'x': 2}],
                "records with x=1 are removed")


@test("difference_with uses the comparator")
def test_difference_with():
    assert_that(difference_with([1.0, 2.0, 5.2], near, [1.1, 5.0]) == [2.0], "near values are removed")


@test("plain difference matches difference_with and ==")
def test_difference_fast_path_agrees():
    a = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    b = [1, 5, 7]
    assert_that(difference(a, b) == difference_with(a, lambda x, y: x == y, b), "paths should agree")
    floats = [1.5, 2.5, 1.5, -0.0]
    assert_that(difference(floats, [0.0]) == [1.5, 2.5, 1.5], "-0.0 equals 0.0")
    assert_that(difference([1, 2, 3], [2.0]) == [1, 3], "int/float mix compares with ==")


# --- intersection ---

@test("intersection keeps unique values shared by every sequence")
def test_intersection_basic():
    assert_that(intersection([2, 1], [2, 3]) == [2], "only 2 is shared")
    result = intersection([1, 2, 2, 3, 4], [4, 3, 2], [2, 4, 5])
    assert_that(result == [2, 4], f"expected [2, 4], got {result}")


@test("intersection orders by first appearance in the first sequence")
def test_intersection_order():
    assert_that(intersection([4, 2, 3, 1], [1, 2, 3, 4]) == [4, 2, 3, 1], "order comes from the first sequence")


@test("intersection edge cases")
def test_intersection_edges():
    assert_that(intersection([1, 2], []) == [], "nothing is shared with empty")
    assert_that(intersection([], [1]) == [], "empty has nothing")
    assert_that(intersection([3, 3, 1]) == [3, 1], "a single sequence is deduplicated")


@test("intersection_by and intersection_with")
def test_intersection_variants():
    assert_that(intersection_by(floor, [2.1, 1.2], [2.3, 3.4]) == [2.1], "floor match keeps the first sequence's value")
    assert_that(intersection_with(near, [1.0, 2.0], [2.2, 7.0]) == [2.0], "near values are shared")


@test("intersection_by on generated records")
def test_intersection_by_records():
    first, second = people[:10], people[10:]
    shared = intersection_by(by_id, first, second)
    second_ids = {p['id'] for p in second}
    assert_that(all(p['id'] in second_ids for p in shared), "every kept record has a match")
    assert_that(len({p['id'] for p in shared}) == len(shared), "ids are unique")
    expected_ids = []
    for p in first:
        if p['id'] in second_ids and p['id'] not in expected_ids:
            expected_ids.append(p['id'])
    assert_that([p['id'] for p in shared] == expected_ids, "order follows the first sequence")


# --- union / uniq ---

@test("union keeps the first occurrence across all sequences")
def test_union_basic():
    assert_that(union([2], [1, 2]) == [2, 1], "2 first, then 1")
    assert_that(union([3, 1, 2], [2, 4, 1], [5, 3]) == [3, 1, 2, 4, 5], "encounter order")
    assert_that(union() == [], "no sequences gives nothing")


@test("union of one sequence equals uniq")
def test_union_single_is_uniq():
    data = ['b', 'a', 'b', 'c', 'a']
    assert_that(union(data) == uniq(data) == ['b', 'a', 'c'], "union(s) == uniq(s)")


@test("uniq is idempotent and keeps original objects")
def test_uniq_idempotent():
    data = [3, 1, 3, 2, 1, 1.0, True]
    once = uniq(data)
    assert_that(once == [3, 1, 2], f"1, 1.0 and True are equal, got {once}")
    assert_that(uniq(once) == once, "uniq(uniq(s)) == uniq(s)")
    floats = [2.5, 0.5, 2.5]
    assert_that(uniq(floats) == [2.5, 0.5], "numeric fast path keeps first occurrences")
    assert_that(type(uniq([4, 4, 2])[0]) is int, "elements are not numpy scalars")


@test("uniq handles unhashable elements")
def test_uniq_unhashable():
    data = [[1], [2], [1], {'a': 1}, {'a': 1}]
    assert_that(uniq(data) == [[1], [2], {'a': 1}], "lists and dicts compare with ==")


@test("uniq with nan never merges nan values")
def test_uniq_nan():
    nan = float('nan')
    result = uniq([1.0, nan, 1.0])
    assert_that(len(result) == 2 and result[0] == 1.0, "the nan survives next to 1.0")


@test("union_by, union_with, uniq_by, uniq_with")
def test_union_variants():
    assert_that(union_by(floor, [2.1], [1.2, 2.3]) == [2.1, 1.2], "floor keys")
    assert_that(union_with(near, [1.0], [1.2, 3.0]) == [1.0, 3.0], "near values merge")
    assert_that(uniq_by(floor, [2.1, 1.2, 2.3]) == [2.1, 1.2], "first of each floor")
    assert_that(uniq_with(near, [1.0, 1.3, 2.0]) == [1.0, 2.0], "near values merge")


@test("uniq_by on generated records keeps the first record per city")
def test_uniq_by_records():
    unique_cities = uniq_by(lambda p: p['city'], people)
    cities = [p['city'] for p in unique_cities]
    assert_that(len(cities) == len(set(cities)), "each city appears once")
    assert_that(len(cities) <= 3, "there are only three cities")
    for p in unique_cities:
        first = next(q for q in people if q['city'] == p['city'])
        assert_that(p is first, "the first record of each city is kept")


@test("plain forms match the comparator form")
def test_plain_matches_with():
    eq = lambda x, y: x == y
    a, b, c = [5, 1, 5, 2, 8], [2, 9, 1], [1, 3]
    assert_that(union(a, b, c) == union_with(eq, a, b, c), "union")
    assert_that(intersection(a, b) == intersection_with(eq, a, b), "intersection")
    assert_that(xor(a, b, c) == xor_with(eq, a, b, c), "xor")
    assert_that(uniq(a) == uniq_with(eq, a), "uniq")


# --- xor ---

@test("xor keeps values outside the intersection")
def test_xor_basic():
    assert_that(xor([2, 1], [2, 3]) == [1, 3], "2 is shared")
    assert_that(xor([1, 2], [1, 2]) == [], "identical sequences cancel out")
    assert_that(xor([1, 1, 4], [2]) == [1, 4, 2], "no overlap keeps every unique value")
    assert_that(xor() == [], "no sequences gives nothing")


@test("xor over three sequences removes only the full intersection")
def test_xor_three():
    result = xor([1, 2, 3], [2, 3, 4], [3, 5])
    assert_that(result == [1, 2, 4, 5], f"only 3 is in all three, got {result}")


@test("xor_by and xor_with")
def test_xor_variants():
    assert_that(xor_by(floor, [2.1, 1.2], [2.3, 3.4]) == [1.2, 3.4], "floor keys")
    assert_that(xor_with(near, [1.0, 2.0], [2.1, 3.0]) == [1.0, 3.0], "near values cancel")


# --- removal helpers ---

@test("without and pull drop the given values")
def test_without_pull():
    assert_that(without([2, 1, 2, 3], 1, 2) == [3], "1 and 2 are removed")
    assert_that(pull(['a', 'b', 'c', 'a'], 'a', 'c') == ['b'], "a and c are removed")
    assert_that(pull_all([1, 2, 3, 1], [1, 3]) == [2], "pull_all removes listed values")


@test("without compares with == only, so nan is never removed")
def test_without_nan():
    nan = float('nan')
    result = without([nan, 1, 2], nan, 2)
    assert_that(len(result) == 2 and math.isnan(result[0]) and result[1] == 1, "nan != nan keeps it")
    again = pull([nan, 1, 2], nan, 2)
    assert_that(len(again) == 2 and math.isnan(again[0]), "without and pull agree")


@test("pull_all_by and pull_all_with")
def test_pull_all_variants():
    data = [{'x': 1}, {'x': 2}, {'x': 3}, {'x': 1}]
    assert_that(pull_all_by(data, [{'x': 1}, {'x': 3}], lambda o: o['x']) == [{'x': 2}], "by key")
    assert_that(pull_all_with([1.0, 2.0, 3.0], [2.2], near) == [1.0, 3.0], "by comparator")


@test("pull_at drops positions")
def test_pull_at():
    assert_that(pull_at(['a', 'b', 'c', 'd'], 1, 3) == ['a', 'c'], "positions 1 and 3 are removed")
    assert_that(pull_at([1, 2], 5) == [1, 2], "out-of-range positions are ignored")


@test("inputs are not mutated")
def test_no_mutation():
    a, b = [3, 1, 3], [1]
    difference(a, b), union(a, b), xor(a, b), intersection(a, b), uniq(a)
    assert_that(a == [3, 1, 3] and b == [1], "inputs should be untouched")


@test("comparator errors propagate to the caller")
def test_comparator_errors():
    def broken(x, y):
        raise RuntimeError("boom")
    suite.assert_raises(RuntimeError, union_with, broken, [1, 2])
    suite.assert_raises(KeyError, uniq_by, lambda o: o['missing'], [{'a': 1}, {'a': 2}])


# --- fluent api ---

@test("set accessor mirrors the standalone functions")
def test_set_accessor():
    assert_that(S([2, 1]).set.difference([2, 3]).to.list() == [1], "difference")
    assert_that(S([2, 1]).set.xor([2, 3]).to.list() == [1, 3], "xor")
    assert_that(S([1, 2]).set.union([2, 3]).to.list() == [1, 2, 3], "union")
    assert_that(S([1, 2, 3]).set.intersection([3, 1]).to.list() == [1, 3], "intersection")
    assert_that(S([1.1, 1.9, 2.2]).set.uniq(floor).to.list() == [1.1, 2.2], "uniq by key")
    assert_that(S([1, 2, 3]).set.pull_at(0).to.list() == [2, 3], "pull_at")
    assert_that(empty().set.union([1]).to.list() == [1], "empty receiver")


@test("set accessor boolean checks")
def test_set_checks():
    assert_that(S([1, 2]).set.is_subset_of([2, 1, 3]), "subset")
    assert_that(not S([1, 4]).set.is_subset_of([1, 2]), "not a subset")
    assert_that(S([1, 2]).set.is_disjoint_with([3]), "disjoint")


if __name__ == "__main__":
    suite.run(title="slicy set algebra test")

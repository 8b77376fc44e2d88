from hypothesis import given
from hypothesis import strategies as st

from pycollect.collection import Collection

elements = st.lists(st.integers())
thresholds = st.integers()


@given(elements, thresholds)
def test_filter_is_ordered_subsequence(s, n):
    assert [e for e in s if e >= n] == Collection(s).filter(lambda e: e >= n).all()


@given(elements, thresholds)
def test_filter_returns_collection(s, n):
    assert isinstance(Collection(s).filter(lambda e: e >= n), Collection)


@given(elements)
def test_construction_round_trip(s):
    assert s == Collection(s).all()
    assert s == Collection(s).filter(lambda e: True).all()


@given(elements, thresholds)
def test_filter_narrowing_is_idempotent(s, n):
    filtered = Collection(s).filter(lambda e: e >= n)
    assert filtered.filter(lambda e: e >= n) == filtered


@given(elements, thresholds, thresholds)
def test_chained_filters_match_conjunction(s, lo, hi):
    chained = Collection(s).filter(lambda e: e >= lo).filter(lambda e: e <= hi)
    assert chained == Collection(s).filter(lambda e: lo <= e <= hi)


@given(elements, thresholds)
def test_filter_and_reject_partition_elements(s, n):
    coll = Collection(s)
    kept = coll.filter(lambda e: e >= n)
    dropped = coll.reject(lambda e: e >= n)
    assert len(coll) == len(kept) + len(dropped)
    assert sorted(s) == sorted(kept.all() + dropped.all())


@given(elements, st.integers(min_value=1, max_value=10))
def test_chunks_concatenate_to_original(s, size):
    chunks = Collection(s).chunk(size)
    assert s == [e for chunk in chunks for e in chunk]
    assert all(0 < len(chunk) <= size for chunk in chunks)

"""Property tests: bounded_sum vs an unbounded prefix-sum reference.

Uses Hypothesis to generate int32 sequences and checks that bounded_sum accepts
exactly the sequences whose every prefix sum is in range, returning the builtin sum.
"""

from __future__ import annotations

import importlib.util
from itertools import accumulate

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from checked_sum import SumOverflowError, SumUnderflowError, bounded_sum

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

int32s = st.integers(min_value=I32_MIN, max_value=I32_MAX)
# Values clustered near the bounds so that both outcomes are common.
edgy_int32s = st.one_of(
    int32s,
    st.integers(min_value=I32_MAX - 1000, max_value=I32_MAX),
    st.integers(min_value=I32_MIN, max_value=I32_MIN + 1000),
    st.integers(min_value=-1000, max_value=1000),
)


@given(x=int32s)
def test_single_element_is_identity(x: int) -> None:
    assert bounded_sum([x]) == x


@given(xs=st.lists(st.integers(min_value=-(2**22), max_value=2**22), max_size=200))
def test_small_values_always_sum_exactly(xs: list[int]) -> None:
    # 200 * 2**22 < 2**31, so no prefix can leave the range.
    assert bounded_sum(xs) == sum(xs)


@settings(max_examples=300)
@given(xs=st.lists(edgy_int32s, max_size=12))
def test_matches_prefix_sum_reference(xs: list[int]) -> None:
    first_bad = None
    for i, s in enumerate(accumulate(xs)):
        if not (I32_MIN <= s <= I32_MAX):
            first_bad = (i, s)
            break

    if first_bad is None:
        assert bounded_sum(xs) == sum(xs)
        return

    i, s = first_bad
    expected = SumOverflowError if s > I32_MAX else SumUnderflowError
    with pytest.raises(expected) as excinfo:
        bounded_sum(xs)
    assert excinfo.value.index == i
    assert excinfo.value.partial_sum == s


@given(xs=st.lists(edgy_int32s, max_size=12))
def test_repeated_calls_agree(xs: list[int]) -> None:
    def outcome() -> object:
        try:
            return bounded_sum(xs)
        except (SumOverflowError, SumUnderflowError) as exc:
            return type(exc)

    assert outcome() == outcome()

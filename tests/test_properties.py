"""
Property-based tests for quantile invariants.

Every supported method must keep quantiles inside the batch range, be
monotone in the fraction, and agree with the sorted middle value(s) at 0.5.
"""

from __future__ import annotations

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from quantile_engine import boxplot_stats, empirical_fractions, get_method_names, quantile

pytestmark = pytest.mark.unit

# Slack for interpolation rounding, relative to the batch scale
TOLERANCE = 1e-9


@st.composite
def batch_strategy(draw, min_size=1, max_size=60):
    """Generate finite numeric batches."""
    return draw(
        st.lists(
            st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False),
            min_size=min_size,
            max_size=max_size,
        )
    )


fraction_strategy = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)
method_strategy = st.sampled_from(get_method_names())


def _slack(values) -> float:
    return TOLERANCE * (1.0 + max(abs(v) for v in values))


@settings(max_examples=100, deadline=None)
@given(values=batch_strategy(), f=fraction_strategy, method=method_strategy)
def test_quantile_within_batch_range(values, f, method):
    q = quantile(values, f, method)
    slack = _slack(values)
    assert min(values) - slack <= q <= max(values) + slack


@settings(max_examples=100, deadline=None)
@given(values=batch_strategy(), f1=fraction_strategy, f2=fraction_strategy, method=method_strategy)
def test_quantile_monotone_in_fraction(values, f1, f2, method):
    lo, hi = sorted((f1, f2))
    q_lo, q_hi = quantile(values, [lo, hi], method)
    assert q_lo <= q_hi + _slack(values)


@settings(max_examples=100, deadline=None)
@given(values=batch_strategy(min_size=2), method=method_strategy)
def test_median_matches_middle_values(values, method):
    ordered = sorted(values)
    n = len(ordered)
    if n % 2:
        expected = ordered[n // 2]
    else:
        expected = (ordered[n // 2 - 1] + ordered[n // 2]) / 2
    assert quantile(values, 0.5, method) == pytest.approx(expected, rel=1e-9, abs=_slack(values))


@settings(max_examples=50, deadline=None)
@given(values=batch_strategy())
def test_empirical_fractions_preserve_multiset(values):
    pairs = empirical_fractions(values)
    assert sorted(values) == [p.value for p in pairs]
    fs = [p.f for p in pairs]
    assert all(a < b for a, b in zip(fs, fs[1:]))


@settings(max_examples=50, deadline=None)
@given(values=batch_strategy(min_size=2), method=method_strategy)
def test_boxplot_hinges_match_quartiles(values, method):
    stats = boxplot_stats(values, method, whis=1.5)
    q1, q3 = quantile(values, [0.25, 0.75], method)
    assert stats["q1"] == q1
    assert stats["q3"] == q3
    assert stats["lower_whisker"] <= stats["upper_whisker"]
    array = np.array(values)
    inside = (array >= stats["lower_fence"]) & (array <= stats["upper_fence"])
    assert len(stats["outliers"]) + int(inside.sum()) == len(values)


@settings(max_examples=100, deadline=None)
@given(
    values=st.lists(st.floats(allow_nan=False, allow_infinity=False), min_size=1, max_size=20),
    f=fraction_strategy,
    method=method_strategy,
)
def test_quantile_stays_finite_across_float_range(values, f, method):
    q = quantile(values, f, method)
    assert np.isfinite(q)
    assert min(values) <= q <= max(values)

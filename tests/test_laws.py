"""Property tests for the container laws."""

from hypothesis import given, settings
from hypothesis import strategies as st

import liftkit as lk

values = st.one_of(st.integers(), st.text(), st.lists(st.integers()), st.none())
errors = st.one_of(st.text(min_size=1), st.integers())
options = st.one_of(values.map(lk.Present), st.just(lk.ABSENT))
results = st.one_of(values.map(lk.Ok), errors.map(lk.Failed))

_settings = settings(max_examples=50, deadline=None, derandomize=True)


@given(x=values)
@_settings
def test_present_predicates_for_any_value(x: object) -> None:
    """Test that Present is present and not absent for any payload."""
    opt = lk.Present(x)
    assert opt.is_present()
    assert not opt.is_absent()


@given(opt=options)
@_settings
def test_option_predicates_are_exclusive(opt: lk.Option[object]) -> None:
    """Test that exactly one Option predicate holds."""
    assert opt.is_present() != opt.is_absent()


@given(x=values)
@_settings
def test_present_extraction_law(x: object) -> None:
    """Test that extracting from Present gives back the value and a success flag."""
    assert lk.Present(x).extract() == (x, True)


@given(opt=options)
@_settings
def test_option_functor_identity(opt: lk.Option[object]) -> None:
    """Test that mapping the identity function leaves any option unchanged."""
    assert lk.map_option(lambda v: v)(opt) == opt


@given(a=values, b=values)
@_settings
def test_map2_option_pairs_values(a: object, b: object) -> None:
    """Test that map2_option applies the function to both present values."""
    assert lk.map2_option(lambda x, y: (x, y))(lk.Present(a), lk.Present(b)) == lk.Present((a, b))


@given(res=results)
@_settings
def test_result_predicates_are_exclusive(res: lk.Result[object, object]) -> None:
    """Test that exactly one Result predicate holds."""
    assert res.is_ok() != res.is_failed()


@given(x=values)
@_settings
def test_ok_extract_round_trip(x: object) -> None:
    """Test that re-wrapping an extracted Ok value gives an equal container."""
    value, err = lk.Ok(x).extract()
    assert err is None
    assert lk.Ok(value) == lk.Ok(x)


@given(e=errors)
@_settings
def test_failed_extraction_keeps_error(e: object) -> None:
    """Test that extracting from Failed gives back the very same error."""
    value, err = lk.Failed(e).extract()
    assert value is None
    assert err is e


@given(res=results)
@_settings
def test_result_functor_identity(res: lk.Result[object, object]) -> None:
    """Test that mapping the identity function leaves any result unchanged."""
    assert lk.map_result(lambda v: v)(res) == res


@given(e1=errors, e2=errors)
@_settings
def test_map2_result_left_error_wins(e1: object, e2: object) -> None:
    """Test left precedence when both operands failed."""
    res = lk.map2_result(lambda a, b: (a, b))(lk.Failed(e1), lk.Failed(e2))
    assert res.unwrap_failed() is e1


@given(x=values, err=st.one_of(st.none(), errors))
@_settings
def test_legacy_adapters_agree(x: object, err: object) -> None:
    """Test that both legacy adapters succeed exactly when there is no error."""
    opt = lk.from_legacy_option(x, err)
    res = lk.from_legacy_result(x, err)
    assert opt.is_present() == res.is_ok() == (err is None)
    if err is not None:
        assert res.unwrap_failed() is err

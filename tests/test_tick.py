import pytest

from tickbook.tick import (
    DECIMAL_GROW_MULTIPLIERS,
    DECIMAL_SHRINK_MULTIPLIERS,
    MAX_DECIMALS,
    DecimalRangeError,
    Decimals,
)

U32_MAX = 2**32 - 1


def test_tick_to_f64():
    decimals = Decimals(3)
    reference = decimals.reference_tick_to_f64(U32_MAX)
    fast = decimals.fast_tick_to_f64(U32_MAX)
    assert reference == fast


@pytest.mark.parametrize("places", range(MAX_DECIMALS + 1))
def test_compare_tick_conversion_methods(places):
    decimals = Decimals(places)
    assert decimals.reference_tick_to_f64(U32_MAX) == decimals.fast_tick_to_f64(
        U32_MAX
    )


def test_bench_tick_conversion_values_agree():
    decimals = Decimals(2)
    assert decimals.reference_tick_to_f64(1234) == decimals.fast_tick_to_f64(1234)


def test_value_round_trip():
    assert [Decimals(n).value() for n in range(MAX_DECIMALS + 1)] == list(
        range(MAX_DECIMALS + 1)
    )


@pytest.mark.parametrize("bad", [MAX_DECIMALS + 1, 255, 256, -1, 10**6])
def test_out_of_range_rejected(bad):
    with pytest.raises(DecimalRangeError):
        Decimals(bad)


def test_error_message():
    with pytest.raises(DecimalRangeError, match="range must be between 0 and 18"):
        Decimals(19)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        Decimals(100)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        Decimals(2.5)


def test_equality_and_hash():
    assert Decimals(2) == Decimals(2)
    assert not Decimals(2) == Decimals(3)
    assert len({Decimals(4), Decimals(4), Decimals(5)}) == 2


def test_zero_decimals_is_identity():
    assert Decimals(0).fast_tick_to_f64(1234) == 1234.0


@pytest.mark.parametrize("places", range(MAX_DECIMALS + 1))
def test_fast_conversion_uses_shrink_table(places):
    assert len(DECIMAL_SHRINK_MULTIPLIERS) == MAX_DECIMALS + 1
    assert len(DECIMAL_GROW_MULTIPLIERS) == MAX_DECIMALS + 1
    assert DECIMAL_GROW_MULTIPLIERS[places] == 10.0**places
    assert Decimals(places).fast_tick_to_f64(1) == DECIMAL_SHRINK_MULTIPLIERS[places]
import pytest
from sympy import Rational

from base_utils import encode
from errors import DuplicateAbscissa, InsufficientPoints, InvalidBase, InvalidDigit, InvalidRequest
from general_utils import (
    EncodedShare, ReconstructionRequest, collect_points, format_big_number, reconstruct, solve,
)
from sss_utils import Point


# y = x^2 + x + 2 -> 4, 8, 14, 22 con x = 1..4
SHARES = [
    EncodedShare(index=1, base=10, value="4"),
    EncodedShare(index=2, base=2, value="1000"),
    EncodedShare(index=3, base=16, value="E"),
    EncodedShare(index=4, base=4, value="112"),
]


def test_reconstruct_secret():
    assert reconstruct(SHARES, ReconstructionRequest(n=4, k=3)) == 2
    assert reconstruct(SHARES, ReconstructionRequest(n=4, k=4)) == 2


def test_points_follow_index_order_not_input_order():
    shuffled = [SHARES[3], SHARES[1], SHARES[0], SHARES[2]]
    points = collect_points(shuffled, ReconstructionRequest(n=4, k=3))
    assert points == [Point(1, 4), Point(2, 8), Point(3, 14)]


def test_solve_reports_points_used():
    result = solve(SHARES, ReconstructionRequest(n=4, k=3))
    assert result.secret == 2
    assert result.points == (Point(1, 4), Point(2, 8), Point(3, 14))


def test_solve_other_target():
    result = solve(SHARES, ReconstructionRequest(n=4, k=3), x_target=2)
    assert result.secret == 8


def test_shares_outside_range_are_ignored():
    shares = SHARES + [EncodedShare(index=9, base=10, value="999")]
    points = collect_points(shares, ReconstructionRequest(n=4, k=4))
    assert [p.x for p in points] == [1, 2, 3, 4]


def test_missing_indices_are_skipped():
    shares = [SHARES[0], SHARES[2], SHARES[3]]
    points = collect_points(shares, ReconstructionRequest(n=4, k=3))
    assert [p.x for p in points] == [1, 3, 4]
    assert reconstruct(shares, ReconstructionRequest(n=4, k=3)) == 2


def test_insufficient_points():
    with pytest.raises(InsufficientPoints) as excinfo:
        reconstruct(SHARES[:2], ReconstructionRequest(n=4, k=3))
    assert excinfo.value.available == 2
    assert excinfo.value.required == 3


def test_errors_propagate_unchanged():
    bad_digit = SHARES[:3] + [EncodedShare(index=4, base=2, value="2")]
    with pytest.raises(InvalidDigit):
        reconstruct(bad_digit, ReconstructionRequest(n=4, k=3))

    bad_base = [EncodedShare(index=1, base=40, value="1")] + SHARES[1:]
    with pytest.raises(InvalidBase):
        reconstruct(bad_base, ReconstructionRequest(n=4, k=3))

    duplicated = [SHARES[0], EncodedShare(index=1, base=10, value="4"), SHARES[1]]
    with pytest.raises(DuplicateAbscissa):
        reconstruct(duplicated, ReconstructionRequest(n=4, k=3))


def test_invalid_request():
    with pytest.raises(InvalidRequest):
        ReconstructionRequest(n=3, k=0)
    with pytest.raises(InvalidRequest):
        ReconstructionRequest(n=3, k=4)


def test_format_big_number():
    assert format_big_number(12345) == "12345"
    formatted = format_big_number(10 ** 40, limit=10)
    assert formatted == "10000...00000"


def test_reconstruct_huge_share():
    secret = 10 ** 5000 + 7
    shares = [EncodedShare(index=1, base=36, value=encode(secret, 36))]
    assert reconstruct(shares, ReconstructionRequest(n=1, k=1)) == secret


def test_format_big_number_huge_values():
    value = 10 ** 5000 + 7
    formatted = format_big_number(value)
    assert formatted.startswith("0x")
    assert formatted.endswith(f"({value.bit_length()} bit)")

    full = format_big_number(value, limit=None)
    assert int(full.split()[0], 16) == value

    assert format_big_number(Rational(-1, 2)) == "-1/2"
    assert format_big_number(Rational(value, 3)).count("0x") == 1

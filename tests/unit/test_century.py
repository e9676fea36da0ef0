from datetime import date

import pytest

from birth_number.domain.exceptions import FormatError
from birth_number.domain.services.century import decode_date, resolve_century


@pytest.mark.parametrize(
    ("year", "individual_number", "century"),
    [
        (70, 27, 1900),
        (77, 303, 1900),
        (0, 499, 1900),
        (40, 900, 1900),
        (99, 999, 1900),
        (77, 603, 1800),
        (54, 500, 1800),
        (99, 749, 1800),
        (53, 500, 2000),
        (54, 750, 2000),
        (39, 900, 2000),
        (2, 912, 2000),
        (11, 639, 2000),
    ],
)
def test_resolve_century(year, individual_number, century):
    assert resolve_century(year, individual_number) == century


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        ("01017000027", date(1970, 1, 1)),
        ("12056647528", date(1966, 5, 12)),
        ("11067760303", date(1877, 6, 11)),
        ("04078173039", date(1881, 7, 4)),
        ("26030291270", date(2002, 3, 26)),
        ("14041163918", date(2011, 4, 14)),
    ],
)
def test_decode_date(number, expected):
    assert decode_date(number) == expected


@pytest.mark.parametrize("number", ["00000000000", "31047000027", "30027000027", "01137000027"])
def test_decode_date_rejects_impossible_dates(number):
    with pytest.raises(FormatError):
        decode_date(number)

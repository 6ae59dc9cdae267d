import pytest

from ...core.exceptions import ValidationError
from ..gtin import calculate_check_digit, is_valid_gtin, normalize_gtin, validate_gtin


@pytest.mark.parametrize(
    "gtin",
    [
        "4006381333931",  # GTIN-13
        "96385074",  # GTIN-8
        "036000291452",  # GTIN-12
        "10036000291459",  # GTIN-14
        "400 6381-333931",
    ],
)
def test_is_valid_gtin(gtin):
    assert is_valid_gtin(gtin)


@pytest.mark.parametrize(
    "gtin",
    [
        "4006381333932",  # wrong check digit
        "400638133393",  # 12 digits, wrong check digit
        "12345",
        "40063813339A1",
        "",
    ],
)
def test_is_valid_gtin_rejects(gtin):
    assert not is_valid_gtin(gtin)


def test_calculate_check_digit():
    assert calculate_check_digit("400638133393") == 1


def test_normalize_gtin_strips_separators():
    assert normalize_gtin(" 4006381-333931 ") == "4006381333931"


def test_validate_gtin_returns_normalized_value():
    assert validate_gtin("4006381 333931") == "4006381333931"


def test_validate_gtin_error_names_field():
    # when
    with pytest.raises(ValidationError) as error:
        validate_gtin("123", field="scanned_gtin")

    # then
    assert error.value.field == "scanned_gtin"
    assert error.value.message.startswith("GTIN format is invalid.")

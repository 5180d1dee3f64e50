"""ValidationSkill 술어 및 후보 검증 테스트"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from src.models.errors import ValidationError
from src.models.ticket import Ticket
from src.skills.validation import ValidationSkill


def _candidate(**overrides):
    data = {
        "train_number": "A101",
        "destination": "Boston",
        "departure_time": "08:00",
        "travel_time": "03:45",
        "price": 30.0,
    }
    data.update(overrides)
    return data


class TestIsValidTime:
    @pytest.mark.parametrize("value", ["00:00", "23:59", "08:05", "12:30"])
    def test_valid(self, value):
        assert ValidationSkill.is_valid_time(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "24:00",   # 시 범위 초과
            "12:60",   # 분 범위 초과
            "9:30",    # 길이 4
            "09:300",  # 길이 6
            "12:5a",   # 숫자 아님
            "12-30",   # 구분자
            "1a:30",
            "+1:30",
            " 1:30",
            "12:-1",
            "",
        ],
    )
    def test_invalid(self, value):
        assert ValidationSkill.is_valid_time(value) is False

    def test_non_string(self):
        assert ValidationSkill.is_valid_time(1230) is False
        assert ValidationSkill.is_valid_time(None) is False


class TestIsPositive:
    @pytest.mark.parametrize("value", [0.01, 1, 20, 99.99, "12.5", " 7 "])
    def test_positive(self, value):
        assert ValidationSkill.is_positive(value) is True

    @pytest.mark.parametrize(
        "value", [0, 0.0, -5, -0.01, "abc", "", None, True, math.nan, math.inf, [1]],
    )
    def test_not_positive(self, value):
        assert ValidationSkill.is_positive(value) is False

    def test_int_beyond_float_range(self):
        assert ValidationSkill.is_positive(10**400) is True
        assert ValidationSkill.is_positive(Decimal("1e400")) is True
        assert ValidationSkill.is_positive(-(10**400)) is False

    @pytest.mark.parametrize("value", [Decimal("2.50"), Fraction(1, 3)])
    def test_decimal_and_fraction(self, value):
        assert ValidationSkill.is_positive(value) is True

    @pytest.mark.parametrize(
        "value", [Decimal("-1"), Decimal("0"), Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity")],
    )
    def test_decimal_not_positive(self, value):
        assert ValidationSkill.is_positive(value) is False


class TestCheckField:
    def test_price_is_converted_to_float(self):
        assert ValidationSkill().check_field("price", "12.5") == 12.5

    def test_price_too_large_for_float(self):
        with pytest.raises(ValidationError, match="너무 큽니다") as exc:
            ValidationSkill().check_field("price", 10**400)
        assert exc.value.field == "price"
        with pytest.raises(ValidationError, match="너무 큽니다"):
            ValidationSkill().check_field("price", Decimal("1e400"))

    def test_decimal_price_converted(self):
        assert ValidationSkill().check_field("price", Decimal("19.90")) == 19.9

    def test_blank_text_rejected(self):
        with pytest.raises(ValidationError, match="열차 번호") as exc:
            ValidationSkill().check_field("train_number", "   ")
        assert exc.value.field == "train_number"

    def test_unknown_field(self):
        with pytest.raises(KeyError):
            ValidationSkill().check_field("seat", "1A")


class TestValidateTicket:
    def test_valid_candidate(self):
        ticket = ValidationSkill().validate_ticket(_candidate())
        assert ticket == Ticket("A101", "Boston", "08:00", "03:45", 30.0)

    def test_travel_time_checked_like_departure(self):
        with pytest.raises(ValidationError) as exc:
            ValidationSkill().validate_ticket(_candidate(travel_time="25:00"))
        assert exc.value.field == "travel_time"

    def test_negative_price(self):
        with pytest.raises(ValidationError, match="가격") as exc:
            ValidationSkill().validate_ticket(_candidate(price=-5))
        assert exc.value.field == "price"

    def test_first_failing_field_reported(self):
        with pytest.raises(ValidationError) as exc:
            ValidationSkill().validate_ticket(
                _candidate(destination="", departure_time="9:30")
            )
        assert exc.value.field == "destination"

    def test_missing_field(self):
        data = _candidate()
        del data["price"]
        with pytest.raises(ValidationError) as exc:
            ValidationSkill().validate_ticket(data)
        assert exc.value.field == "price"

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            ValidationSkill().validate_ticket(_candidate(price=0))

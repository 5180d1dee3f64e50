"""입력 검증 스킬

필드 단위 술어와 승차권 후보 검증을 담당한다.
술어는 입출력 없이 순수 함수로 동작하므로 셸과 독립적으로 테스트할 수 있다.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from src.models.errors import ValidationError
from src.models.ticket import TICKET_FIELDS, Ticket


class ValidationSkill:
    """입력 검증 스킬"""

    TIME_LENGTH = 5
    MAX_HOUR = 23
    MAX_MINUTE = 59

    _MESSAGES = {
        "train_number": "열차 번호가 입력되지 않았습니다",
        "destination": "도착역이 입력되지 않았습니다",
        "departure_time": "출발 시각 형식이 올바르지 않습니다 (HH:MM, 24시간제)",
        "travel_time": "소요 시간 형식이 올바르지 않습니다 (HH:MM, 24시간제)",
        "price": "가격은 0보다 큰 숫자여야 합니다",
    }

    @classmethod
    def is_valid_time(cls, value: object) -> bool:
        """HH:MM 검증. 출발 시각과 소요 시간에 동일하게 적용된다."""
        if not isinstance(value, str) or len(value) != cls.TIME_LENGTH:
            return False
        if value[2] != ":":
            return False
        hours, minutes = value[:2], value[3:]
        if not (_is_two_digits(hours) and _is_two_digits(minutes)):
            return False
        return int(hours) <= cls.MAX_HOUR and int(minutes) <= cls.MAX_MINUTE

    @staticmethod
    def is_positive(value: object) -> bool:
        """0보다 큰 유한 숫자인지 검증. 숫자가 아닌 입력은 False.

        float 범위를 넘는 정수나 Decimal도 유한한 양수이므로 True.
        가격으로 저장할 수 있는지(float 변환)는 check_field에서 따로 검사한다.
        """
        if isinstance(value, bool):
            return False
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                return False
        if isinstance(value, Decimal):
            return value.is_finite() and value > 0
        if not isinstance(value, numbers.Real):
            return False
        try:
            finite = math.isfinite(value)
        except OverflowError:
            finite = True
        return finite and value > 0

    @staticmethod
    def is_non_empty(value: object) -> bool:
        return isinstance(value, str) and bool(value.strip())

    def check_field(self, field: str, value: Any) -> Any:
        """단일 필드 검증 후 정규화된 값 반환. 실패 시 ValidationError."""
        if field in ("train_number", "destination"):
            ok = self.is_non_empty(value)
        elif field in ("departure_time", "travel_time"):
            ok = self.is_valid_time(value)
        elif field == "price":
            ok = self.is_positive(value)
        else:
            raise KeyError(f"알 수 없는 필드: {field}")

        if not ok:
            raise ValidationError(field, self._MESSAGES[field])
        if field == "price":
            try:
                price = float(value)
            except OverflowError:
                price = math.inf
            if not math.isfinite(price):
                raise ValidationError(field, "가격이 너무 큽니다")
            return price
        return value

    def validate_ticket(self, data: Mapping[str, Any]) -> Ticket:
        """전체 검증 후 불변 Ticket 반환. 첫 번째 실패 필드로 ValidationError."""
        values = {
            field: self.check_field(field, data.get(field))
            for field in TICKET_FIELDS
        }
        return Ticket(**values)


def _is_two_digits(part: str) -> bool:
    return len(part) == 2 and part.isascii() and part.isdigit()

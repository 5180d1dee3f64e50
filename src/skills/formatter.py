"""표 출력 스킬

승차권 목록을 고정 폭 테두리 표로 렌더링한다.
가격 반올림(소수 둘째 자리)은 여기서만 수행한다.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.models.ticket import Ticket

# (헤더, 폭) - 값이 폭보다 길어도 자르지 않는다
COLUMNS: tuple[tuple[str, int], ...] = (
    ("Train Number", 14),
    ("Destination Station", 20),
    ("Departure Time", 14),
    ("Travel Time", 12),
    ("Price", 11),
)


class TableFormatter:
    """승차권 표 포매터"""

    def __init__(self, currency: str = "USD") -> None:
        self._currency = currency

    @staticmethod
    def border() -> str:
        return "+" + "+".join("-" * (width + 2) for _, width in COLUMNS) + "+"

    @staticmethod
    def _line(cells: Iterable[str]) -> str:
        padded = (
            f" {cell:<{width}} " for cell, (_, width) in zip(cells, COLUMNS)
        )
        return "|" + "|".join(padded) + "|"

    def header(self) -> str:
        return self._line(name for name, _ in COLUMNS)

    def row(self, ticket: Ticket) -> str:
        return self._line((
            ticket.train_number,
            ticket.destination,
            ticket.departure_time,
            ticket.travel_time,
            self.format_price(ticket.price),
        ))

    def table(self, tickets: Iterable[Ticket]) -> str:
        """헤더 포함 전체 표"""
        border = self.border()
        lines = [border, self.header(), border]
        lines.extend(self.row(t) for t in tickets)
        lines.append(border)
        return "\n".join(lines)

    def single(self, ticket: Ticket) -> str:
        """헤더 없이 한 행만 테두리로 감싼 표"""
        border = self.border()
        return "\n".join([border, self.row(ticket), border])

    @staticmethod
    def format_price(price: float) -> str:
        return f"{price:.2f}"

    def average_line(self, average: float) -> str:
        return f"평균 승차권 가격: {self.format_price(average)} {self._currency}"

"""데이터 모델: 열차 승차권 레코드

모든 모델은 frozen=True + slots=True로 불변성과 메모리 효율을 보장한다.
"""

from __future__ import annotations

from dataclasses import dataclass

TICKET_FIELDS: tuple[str, ...] = (
    "train_number",
    "destination",
    "departure_time",
    "travel_time",
    "price",
)


@dataclass(frozen=True, slots=True)
class Ticket:
    """불변 승차권 레코드

    검증은 TicketStore 진입 시점에 ValidationSkill이 담당한다.
    """

    train_number: str
    destination: str
    departure_time: str   # HH:MM 출발 시각
    travel_time: str      # HH:MM 소요 시간
    price: float

    def summary(self) -> str:
        return (
            f"{self.train_number} → {self.destination} "
            f"{self.departure_time} ({self.travel_time}) {self.price:.2f}"
        )

    def to_dict(self) -> dict[str, object]:
        return {name: getattr(self, name) for name in TICKET_FIELDS}

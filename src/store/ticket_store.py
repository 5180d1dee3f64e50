"""승차권 저장소 (TicketStore)

메모리 내 순서 있는 승차권 컬렉션과 그 연산을 제공한다.
- add: 검증 후 끝에 추가 (실패 시 저장소 불변)
- list_tickets / average_price / cheapest_to: 조회
- sort_by_departure_desc: 출발 시각 내림차순 제자리 정렬
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Optional

from src.models.errors import EmptyStoreError, NotFoundError
from src.models.ticket import Ticket
from src.skills.validation import ValidationSkill

logger = logging.getLogger("tickets.store")


def departure_sort_key(ticket: Ticket) -> str:
    """정렬 키: HH:MM은 고정 폭이므로 사전순 = 시간순"""
    return ticket.departure_time


class TicketStore:
    """메모리 내 승차권 저장소 (프로세스 종료 시 소멸)"""

    def __init__(self, validator: Optional[ValidationSkill] = None) -> None:
        self._tickets: list[Ticket] = []
        self._validator = validator or ValidationSkill()

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self) -> Iterator[Ticket]:
        return iter(tuple(self._tickets))

    @property
    def is_empty(self) -> bool:
        return not self._tickets

    # --- 술어 (셸의 재입력 루프에서 사용) ---

    def is_valid_time(self, value: object) -> bool:
        return self._validator.is_valid_time(value)

    def is_positive(self, value: object) -> bool:
        return self._validator.is_positive(value)

    # --- 연산 ---

    def add(self, candidate: Ticket | Mapping[str, Any]) -> Ticket:
        """후보 검증 후 저장소 끝에 추가

        발생 가능한 예외: ValidationError (저장소는 변경되지 않음)
        """
        data = candidate.to_dict() if isinstance(candidate, Ticket) else candidate
        ticket = self._validator.validate_ticket(data)
        self._tickets.append(ticket)
        logger.info("승차권 추가: %s (총 %d건)", ticket.summary(), len(self._tickets))
        return ticket

    def list_tickets(self) -> tuple[Ticket, ...]:
        """현재 순서 그대로의 스냅샷. 빈 튜플이면 데이터 없음."""
        return tuple(self._tickets)

    def average_price(self) -> float:
        """가격 산술 평균 (반올림 없음)

        발생 가능한 예외: EmptyStoreError
        """
        if not self._tickets:
            raise EmptyStoreError("평균을 계산할 데이터가 없습니다")
        total = sum(t.price for t in self._tickets)
        return total / len(self._tickets)

    def cheapest_to(self, destination: str) -> Ticket:
        """목적지 정확 일치(대소문자 구분) 중 최저가 승차권

        동일 최저가가 여러 건이면 먼저 저장된 것을 반환한다.
        발생 가능한 예외: NotFoundError
        """
        matches = [t for t in self._tickets if t.destination == destination]
        if not matches:
            logger.debug("목적지 일치 없음: %r", destination)
            raise NotFoundError(destination)
        return min(matches, key=lambda t: t.price)

    def sort_by_departure_desc(self) -> None:
        """출발 시각 내림차순 (가장 늦은 출발이 먼저) 제자리 정렬"""
        if len(self._tickets) < 2:
            return
        self._tickets.sort(key=departure_sort_key, reverse=True)
        logger.info("출발 시각 내림차순 정렬 완료 (%d건)", len(self._tickets))

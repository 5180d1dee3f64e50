"""pytest 공통 픽스처

모든 테스트에서 공유하는 샘플 승차권과 저장소를 제공한다.
"""

from __future__ import annotations

import pytest

from src.models.config import AppConfig
from src.models.ticket import Ticket
from src.store.ticket_store import TicketStore


@pytest.fixture
def sample_ticket() -> Ticket:
    """표준 테스트용 승차권 (Boston, 30.00)"""
    return Ticket(
        train_number="A101",
        destination="Boston",
        departure_time="08:00",
        travel_time="03:45",
        price=30.0,
    )


@pytest.fixture
def sample_config() -> AppConfig:
    return AppConfig(currency="USD", prompt_indent="")


@pytest.fixture
def empty_store() -> TicketStore:
    return TicketStore()


@pytest.fixture
def boston_store() -> TicketStore:
    """Boston 2건 + NYC 1건"""
    store = TicketStore()
    store.add({
        "train_number": "B1", "destination": "Boston",
        "departure_time": "08:00", "travel_time": "04:00", "price": 50.0,
    })
    store.add({
        "train_number": "B2", "destination": "Boston",
        "departure_time": "23:15", "travel_time": "04:10", "price": 30.0,
    })
    store.add({
        "train_number": "N1", "destination": "NYC",
        "departure_time": "08:00", "travel_time": "01:00", "price": 10.0,
    })
    return store

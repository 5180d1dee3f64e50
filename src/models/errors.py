"""승차권 관리 오류 분류

모든 오류는 복구 가능하며, 메뉴 셸이 잡아서 메시지로 보여준 뒤 루프를 계속한다.
"""

from __future__ import annotations


class TicketError(Exception):
    """승차권 관리 오류 기본 클래스"""


class ValidationError(TicketError, ValueError):
    """필드 단위 검증 실패. 셸은 해당 필드만 다시 입력받는다."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"'{field}' 값이 올바르지 않습니다")


class EmptyStoreError(TicketError):
    """저장된 승차권이 없어 집계할 수 없음"""

    def __init__(self, message: str = "승차권 데이터가 없습니다") -> None:
        super().__init__(message)


class NotFoundError(TicketError, LookupError):
    """목적지 조건에 맞는 승차권 없음"""

    def __init__(self, destination: str) -> None:
        self.destination = destination
        super().__init__(f"'{destination}' 행 승차권이 없습니다")

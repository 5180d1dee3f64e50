"""열차 승차권 관리 - CLI 진입점

사용 예시:
    python -m src.main
    python -m src.main --currency KRW --log-level INFO --log-file logs/tickets.log
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from src.models.config import AppConfig
from src.models.errors import EmptyStoreError, NotFoundError, TicketError, ValidationError
from src.models.ticket import Ticket
from src.skills.formatter import TableFormatter
from src.skills.parser import ParserSkill
from src.skills.validation import ValidationSkill
from src.store.ticket_store import TicketStore
from src.utils.logging_config import setup_logging

logger = logging.getLogger("tickets.cli")


BANNER = r"""
  ╔══════════════════════════════════════════════╗
  ║   열차 승차권 관리 시스템                    ║
  ║   Train Ticket Management System             ║
  ╚══════════════════════════════════════════════╝
"""

MENU = """
=== 열차 승차권 관리 ===
1. 승차권 입력
2. 전체 승차권 보기
3. 평균 가격 계산
4. 목적지별 최저가 승차권 찾기
5. 출발 시각순 정렬 (늦은 시각 먼저)
6. 종료"""

EXIT_CHOICE = 6


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="열차 승차권 관리 (대화형 메뉴)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "예시:\n"
            "  python -m src.main\n"
            "  python -m src.main --currency KRW"
        ),
    )
    p.add_argument(
        "--currency",
        default=None,
        help="가격 옆에 표시할 통화 (기본: $TICKETS_CURRENCY 또는 USD)",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    p.add_argument("--log-file", default=None, help="로그 파일 경로")
    return p


class TicketShell:
    """대화형 메뉴 셸

    모든 입력/출력은 여기서 처리하고, 규칙은 TicketStore와 ValidationSkill에 위임한다.
    """

    def __init__(
        self,
        store: TicketStore,
        config: Optional[AppConfig] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ) -> None:
        self._store = store
        self._config = config or AppConfig()
        self._input = input_func or input
        self._parser = ParserSkill()
        self._validator = ValidationSkill()
        self._formatter = TableFormatter(self._config.currency)
        self._handlers: dict[int, Callable[[], None]] = {
            1: self.input_ticket,
            2: self.show_all,
            3: self.show_average,
            4: self.find_cheapest,
            5: self.sort_by_departure,
        }

    def _say(self, message: str = "") -> None:
        print(f"{self._config.prompt_indent}{message}" if message else "")

    def _error(self, message: object) -> None:
        self._say(f"[오류] {message}")

    def _ask(self, prompt: str) -> str:
        return self._input(f"{self._config.prompt_indent}{prompt}")

    def _prompt_field(
        self,
        field: str,
        prompt: str,
        parse: Callable[[str], object],
    ) -> object:
        """조건을 만족할 때까지 한 필드만 반복 입력"""
        while True:
            raw = self._ask(prompt)
            try:
                return self._validator.check_field(field, parse(raw))
            except ValueError as e:
                logger.debug("필드 재입력 요청: %s (%s)", field, e)
                self._error(e)

    # --- 메뉴 동작 ---

    def input_ticket(self) -> None:
        self._say()
        self._say("승차권 정보를 입력하세요")
        text = self._parser.parse_text
        candidate = {
            "train_number": self._prompt_field("train_number", "열차 번호: ", text),
            "destination": self._prompt_field("destination", "도착역: ", text),
            "departure_time": self._prompt_field(
                "departure_time", "출발 시각 (HH:MM): ", text,
            ),
            "travel_time": self._prompt_field(
                "travel_time", "소요 시간 (HH:MM): ", text,
            ),
            "price": self._prompt_field("price", "가격: ", self._parser.parse_price),
        }
        try:
            self._store.add(candidate)
        except ValidationError as e:
            self._error(e)
            return
        self._say("승차권이 추가되었습니다")

    def show_all(self) -> None:
        tickets = self._store.list_tickets()
        if not tickets:
            self._say("승차권 데이터가 없습니다")
            return
        print("\n승차권 목록:")
        print(self._formatter.table(tickets))

    def show_average(self) -> None:
        try:
            average = self._store.average_price()
        except EmptyStoreError as e:
            self._say(str(e))
            return
        self._say(self._formatter.average_line(average))

    def find_cheapest(self) -> None:
        if self._store.is_empty:
            self._say("승차권 데이터가 없습니다")
            return
        destination = self._parser.parse_text(self._ask("도착역: "))
        try:
            ticket: Ticket = self._store.cheapest_to(destination)
        except NotFoundError:
            self._say(f"'{destination}' 행 승차권을 찾을 수 없습니다")
            return
        print(f"\n'{destination}' 행 최저가 승차권:")
        print(self._formatter.single(ticket))

    def sort_by_departure(self) -> None:
        if self._store.is_empty:
            self._say("정렬할 데이터가 없습니다")
            return
        self._store.sort_by_departure_desc()
        self._say("출발 시각순으로 정렬했습니다 (늦은 시각 먼저)")

    # --- 메인 루프 ---

    def handle(self, choice: Optional[int]) -> bool:
        """메뉴 선택 처리. 계속하면 True, 종료하면 False."""
        if choice == EXIT_CHOICE:
            self._say("프로그램을 종료합니다")
            return False
        handler = self._handlers.get(choice) if choice is not None else None
        if handler is None:
            self._error(f"1-{EXIT_CHOICE} 중에서 선택하세요")
            return True
        try:
            handler()
        except TicketError as e:
            logger.debug("메뉴 %s 처리 중 오류: %s", choice, e)
            self._error(e)
        return True

    def run(self) -> None:
        """종료 선택 또는 입력 종료(EOF)까지 반복"""
        while True:
            print(MENU)
            try:
                raw = self._ask("선택: ")
                if not self.handle(self._parser.parse_choice(raw)):
                    return
            except EOFError:
                self._say()
                self._say("입력이 종료되어 프로그램을 종료합니다")
                return


def cli_entry() -> None:
    """CLI 진입점 (pyproject.toml scripts에서 호출)"""
    main()


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = AppConfig.from_env(
        currency=args.currency,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    setup_logging(level=config.log_level, log_file=config.log_file)

    print(BANNER)
    shell = TicketShell(TicketStore(), config)

    try:
        shell.run()
    except KeyboardInterrupt:
        print("\n  프로그램 종료")
        sys.exit(0)


if __name__ == "__main__":
    main()

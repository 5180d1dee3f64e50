"""로깅 설정

콘솔 + 파일 로깅을 구성한다.
대화형 메뉴 출력과 섞이지 않도록 콘솔 로그는 stderr로 보낸다.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path


# ANSI 컬러 코드
_COLORS = {
    "DEBUG": "\033[36m",     # Cyan
    "INFO": "\033[32m",      # Green
    "WARNING": "\033[33m",   # Yellow
    "ERROR": "\033[31m",     # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}


class ColorFormatter(logging.Formatter):
    """컬러 로그 포매터"""

    def format(self, record: logging.LogRecord) -> str:
        color = _COLORS.get(record.levelname, "")
        reset = _COLORS["RESET"] if color else ""
        # 다른 핸들러에 영향이 없도록 복사본에만 색을 입힌다
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname:<8}{reset}"
        return super().format(colored)


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
) -> None:
    """로깅 초기화

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        log_file: 로그 파일 경로 (None이면 콘솔만)
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # 기존 핸들러 제거
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ColorFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root.addHandler(fh)

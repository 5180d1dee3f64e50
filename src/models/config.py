"""애플리케이션 설정 모델"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_CURRENCY = "USD"


@dataclass
class AppConfig:
    """실행 설정 - CLI 인자 + 환경 변수"""

    # 가격 옆에 붙는 통화 표기 (환산 없음)
    currency: str = DEFAULT_CURRENCY

    # 로깅
    log_level: str = "WARNING"
    log_file: str | None = None

    # 대화형 출력
    prompt_indent: str = "  "

    @classmethod
    def from_env(cls, **overrides: object) -> "AppConfig":
        """TICKETS_CURRENCY 환경 변수를 기본값으로 사용하고 None이 아닌 인자로 덮어쓴다"""
        values: dict[str, object] = {
            "currency": os.environ.get("TICKETS_CURRENCY", "").strip() or DEFAULT_CURRENCY,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]

"""입력 파싱 스킬

대화형 입력 문자열을 구조화된 값으로 변환한다.
"""

from __future__ import annotations


class ParserSkill:
    """입력 파싱 스킬"""

    @staticmethod
    def parse_text(raw: str | None) -> str:
        return (raw or "").strip()

    @staticmethod
    def parse_price(raw: str) -> float:
        """가격 문자열 → float. 숫자가 아니면 ValueError."""
        s = raw.strip().replace(",", "")
        if not s:
            raise ValueError("가격이 입력되지 않았습니다")
        try:
            return float(s)
        except ValueError:
            raise ValueError(f"숫자가 아닙니다: '{raw.strip()}'") from None

    @staticmethod
    def parse_choice(raw: str) -> int | None:
        """메뉴 입력 → 정수. 숫자가 아니면 None."""
        s = raw.strip()
        return int(s) if s.isascii() and s.isdigit() else None

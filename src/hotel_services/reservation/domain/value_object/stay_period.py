from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日時 + チェックアウト日時)"""

    check_in: datetime
    check_out: datetime

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise ValueError("Check-out must be after check-in")

    def days(self) -> int:
        """課金日数を計算する

        時刻は無視して日付の差を取り、同日の場合は最低1日とする。
        """
        days = (self.check_out.date() - self.check_in.date()).days
        return days or 1

    def overlaps(self, other: StayPeriod) -> bool:
        """期間が重なるか（境界が接する場合も重なりとみなす）"""
        return self.check_in <= other.check_out and self.check_out >= other.check_in

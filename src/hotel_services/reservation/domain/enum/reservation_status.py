from enum import Enum


class ReservationStatus(str, Enum):
    """予約ステータス

    CANCELED と ABSENCE は終端状態で、時刻による自動遷移の対象外。
    """

    SCHEDULED = "SCHEDULED"
    IN_USE = "IN_USE"
    FINISHED = "FINISHED"
    CANCELED = "CANCELED"
    ABSENCE = "ABSENCE"

    def is_terminal(self) -> bool:
        return self in (ReservationStatus.CANCELED, ReservationStatus.ABSENCE)


# 客室を占有している状態（重複予約チェックの対象）
ACTIVE_STATUSES: frozenset[ReservationStatus] = frozenset(
    {ReservationStatus.SCHEDULED, ReservationStatus.IN_USE}
)

# 手動クローズで指定できる状態
CLOSING_STATUSES: frozenset[ReservationStatus] = frozenset(
    {ReservationStatus.FINISHED, ReservationStatus.CANCELED, ReservationStatus.ABSENCE}
)

import os
from collections.abc import Iterable, Iterator
from datetime import datetime

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from hotel_services.reservation.domain.entity import Reservation
from hotel_services.reservation.domain.enum import ReservationStatus
from hotel_services.reservation.domain.repository import ReservationRepository
from hotel_services.reservation.domain.value_object import ReservationId, RoomId
from hotel_services.reservation.infrastructure.reservation_item import (
    TIMELINE_PARTITION,
    ReservationItem,
    reservation_key,
    room_partition,
    to_sort_key,
)
from hotel_services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)

ROOM_INDEX = "GSI1"
TIMELINE_INDEX = "GSI2"


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, reservation: Reservation) -> None:
        """予約をDBに保存する"""
        item = ReservationItem.from_entity(reservation).to_item()
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Reservation already exists: {reservation.id}"
                ) from e
            raise

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索"""
        key = reservation_key(reservation_id)
        response = self.table.get_item(
            Key={"PK": key, "SK": key},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Reservation]:
        """全予約をチェックイン順で取得"""
        items = self._query(
            IndexName=TIMELINE_INDEX,
            KeyConditionExpression=Key("GSI2PK").eq(TIMELINE_PARTITION),
        )
        return [self._to_entity(item) for item in items]

    def update(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus | None = None,
    ) -> None:
        """予約のステータスを更新する"""
        key = reservation_key(reservation.id)
        kwargs: dict = {
            "Key": {"PK": key, "SK": key},
            "UpdateExpression": "SET #status = :status",
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {":status": reservation.status.value},
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Reservation status conflict: "
                    f"expected {expected_status}, "
                    f"reservation_id={reservation.id}"
                ) from e
            raise

    def exists_overlap(
        self,
        room_id: RoomId,
        statuses: Iterable[ReservationStatus],
        check_out: datetime,
        check_in: datetime,
    ) -> bool:
        """同じ客室で期間が重なる予約があるか"""
        status_values = [status.value for status in statuses]
        if not status_values:
            return False

        items = self._query(
            IndexName=ROOM_INDEX,
            KeyConditionExpression=Key("GSI1PK").eq(room_partition(room_id))
            & Key("GSI1SK").lte(to_sort_key(check_out)),
            FilterExpression=Attr("check_out").gte(to_sort_key(check_in))
            & Attr("status").is_in(status_values),
        )
        # フィルタ後に空のページがあり得るので、1件見つかるまでページを辿る
        return next(items, None) is not None

    def find_by_check_in_between(
        self, start: datetime, end: datetime
    ) -> list[Reservation]:
        """チェックイン日時が [start, end) の予約を取得"""
        items = self._query(
            IndexName=TIMELINE_INDEX,
            KeyConditionExpression=Key("GSI2PK").eq(TIMELINE_PARTITION)
            & Key("GSI2SK").gte(to_sort_key(start)),
            FilterExpression=Attr("check_in").lt(to_sort_key(end)),
        )
        return [self._to_entity(item) for item in items]

    def find_by_status(self, status: ReservationStatus) -> list[Reservation]:
        """保存済みステータスで検索"""
        items = self._query(
            IndexName=TIMELINE_INDEX,
            KeyConditionExpression=Key("GSI2PK").eq(TIMELINE_PARTITION),
            FilterExpression=Attr("status").eq(status.value),
        )
        return [self._to_entity(item) for item in items]

    def _query(self, **kwargs) -> Iterator[dict]:
        """LastEvaluatedKey を辿りながらアイテムを返す"""
        while True:
            response = self.table.query(**kwargs)
            yield from response.get("Items", [])
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return
            kwargs["ExclusiveStartKey"] = last_key

    def _to_entity(self, item: dict) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return ReservationItem.model_validate(item).to_entity()

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from services.booking.domain.entity import Booking, Hotel, Room, User
from services.booking.domain.enum import BookingWriteKind
from services.booking.domain.repository import (
    BookingWrite,
    ReservationChangeSet,
    ReservationStore,
)
from services.booking.domain.value_object import (
    BookingId,
    HotelId,
    LedgerAdjustment,
    RoomId,
    StayPeriod,
    UserId,
)
from services.booking.settings import StoreSettings
from services.shared.domain import (
    CapacityExceededException,
    Currency,
    DomainException,
    DuplicateResourceException,
    InsufficientInventoryException,
    Money,
    OptimisticLockException,
    ResourceNotFoundException,
    StoreFailureException,
)
from services.shared.utils import get_logger

logger = get_logger()

_ROOM_BOUNDS_CONDITION = (
    "attribute_exists(PK) AND number_available BETWEEN :lower AND :upper"
)
_BOOKING_VERSION_CONDITION = "attribute_exists(PK) AND version = :expected"


def _parse_date(value: str) -> date:
    if "T" in value:
        return datetime.fromisoformat(value)
    return date.fromisoformat(value)


class DynamoDBReservationStore(ReservationStore):
    """DynamoDB を使用した ReservationStore の具象実装

    シングルテーブル設計:
    - USER#<id> / PROFILE, HOTEL#<id> / PROFILE, ROOM#<id> / PROFILE
    - BOOKING#<id> / BOOKING（GSI1: USER#<user_id> / BOOKING#<created_at>#<id>）
    """

    def __init__(
        self,
        table_name: str | None = None,
        settings: StoreSettings | None = None,
        dynamodb: Any = None,
    ) -> None:
        self.settings = settings or StoreSettings.from_env()
        self.table_name = table_name or self.settings.table_name
        self.dynamodb = dynamodb or boto3.resource(
            "dynamodb", config=self.settings.boto_config()
        )
        self.table = self.dynamodb.Table(self.table_name)
        self.client = self.dynamodb.meta.client

    def find_user(self, user_id: UserId) -> User | None:
        item = self._get_item(f"USER#{user_id}", "PROFILE")
        if not item:
            return None
        return User(id=UserId(item["user_id"]), name=item.get("name"))

    def find_hotel(self, hotel_id: HotelId) -> Hotel | None:
        item = self._get_item(f"HOTEL#{hotel_id}", "PROFILE")
        if not item:
            return None
        return Hotel(id=HotelId(item["hotel_id"]), name=item["name"])

    def find_room(self, room_id: RoomId) -> Room | None:
        item = self._get_item(f"ROOM#{room_id}", "PROFILE")
        if not item:
            return None
        return self._to_room(item)

    def find_booking(self, booking_id: BookingId) -> Booking | None:
        item = self._get_item(f"BOOKING#{booking_id}", "BOOKING")
        if not item:
            return None
        return self._to_booking(item)

    def find_bookings_by_user(self, user_id: UserId) -> list[Booking]:
        """GSI1 で所有者の予約を取得する（GSI は結果整合性）"""
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq(f"USER#{user_id}")
            & Key("GSI1SK").begins_with("BOOKING#"),
        }
        items: list[dict] = []
        try:
            while True:
                response = self.table.query(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            raise StoreFailureException(f"Failed to list bookings: {e}") from e
        return [self._to_booking(item) for item in items]

    def adjust_availability(self, adjustment: LedgerAdjustment) -> int:
        """空室数を 1 回の条件付き UpdateItem で更新する"""
        try:
            response = self.table.update_item(
                ReturnValues="UPDATED_NEW",
                **self._room_update(adjustment),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise self._room_rejection(adjustment, "Item" in e.response) from e
            raise StoreFailureException(f"Failed to adjust availability: {e}") from e
        except BotoCoreError as e:
            raise StoreFailureException(f"Failed to adjust availability: {e}") from e
        return int(response["Attributes"]["number_available"])

    def commit(self, change_set: ReservationChangeSet) -> None:
        """予約の書き込みと空室数の更新を TransactWriteItems で確定する"""
        targets: list[LedgerAdjustment | BookingWrite] = []
        transact_items: list[dict] = []
        for adjustment in change_set.adjustments:
            targets.append(adjustment)
            transact_items.append(
                {"Update": {"TableName": self.table_name, **self._room_update(adjustment)}}
            )
        for write in change_set.writes:
            targets.append(write)
            transact_items.append(self._booking_operation(write))

        try:
            self.client.transact_write_items(
                TransactItems=transact_items,
                ClientRequestToken=str(uuid.uuid4()),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                raise self._cancellation_error(e, targets) from e
            raise StoreFailureException(f"Failed to commit reservation: {e}") from e
        except BotoCoreError as e:
            raise StoreFailureException(f"Failed to commit reservation: {e}") from e

    def _get_item(self, pk: str, sk: str) -> dict | None:
        try:
            response = self.table.get_item(
                Key={"PK": pk, "SK": sk},
                ConsistentRead=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise StoreFailureException(f"Failed to read {pk}: {e}") from e
        return response.get("Item")

    def _room_update(self, adjustment: LedgerAdjustment) -> dict:
        return {
            "Key": {"PK": f"ROOM#{adjustment.room_id}", "SK": "PROFILE"},
            "UpdateExpression": "SET number_available = number_available + :delta",
            "ConditionExpression": _ROOM_BOUNDS_CONDITION,
            "ReturnValuesOnConditionCheckFailure": "ALL_OLD",
            "ExpressionAttributeValues": {
                ":delta": adjustment.delta,
                ":lower": adjustment.lower_bound,
                ":upper": adjustment.upper_bound,
            },
        }

    def _booking_operation(self, write: BookingWrite) -> dict:
        booking = write.booking
        if write.kind is BookingWriteKind.CREATE:
            return {
                "Put": {
                    "TableName": self.table_name,
                    "Item": self._to_item(booking),
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            }

        version_check = {
            "ConditionExpression": _BOOKING_VERSION_CONDITION,
            "ExpressionAttributeValues": {":expected": write.expected_version},
            "ReturnValuesOnConditionCheckFailure": "ALL_OLD",
        }
        if write.kind is BookingWriteKind.REPLACE:
            return {
                "Put": {
                    "TableName": self.table_name,
                    "Item": self._to_item(booking),
                    **version_check,
                }
            }
        return {
            "Delete": {
                "TableName": self.table_name,
                "Key": {"PK": f"BOOKING#{booking.id}", "SK": "BOOKING"},
                **version_check,
            }
        }

    def _room_rejection(
        self, adjustment: LedgerAdjustment, room_exists: bool
    ) -> DomainException:
        # 失敗時の旧アイテム（ALL_OLD）が無ければ部屋そのものが無い
        if not room_exists:
            return ResourceNotFoundException("Room", adjustment.room_id)
        if adjustment.is_debit:
            return InsufficientInventoryException(
                f"Room {adjustment.room_id} does not have "
                f"{-adjustment.delta} rooms available"
            )
        return CapacityExceededException(
            f"Room {adjustment.room_id} cannot be credited {adjustment.delta} "
            f"rooms beyond its capacity of {adjustment.capacity}"
        )

    def _cancellation_error(
        self, error: ClientError, targets: list[LedgerAdjustment | BookingWrite]
    ) -> DomainException:
        reasons = error.response.get("CancellationReasons", [])
        for target, reason in zip(targets, reasons):
            code = reason.get("Code")
            if code in (None, "None"):
                continue
            if code == "TransactionConflict":
                return OptimisticLockException(
                    "Reservation is being modified by another request"
                )
            if code != "ConditionalCheckFailed":
                break
            if isinstance(target, LedgerAdjustment):
                return self._room_rejection(target, "Item" in reason)
            booking_id = target.booking.id
            if target.kind is BookingWriteKind.CREATE:
                return DuplicateResourceException(
                    f"Booking already exists: {booking_id}"
                )
            if "Item" not in reason:
                return ResourceNotFoundException("Booking", booking_id)
            return OptimisticLockException(
                f"Booking was modified concurrently: {booking_id}, "
                f"expected version {target.expected_version}"
            )

        logger.error(
            "Reservation transaction cancelled",
            extra={"cancellation_reasons": reasons},
        )
        return StoreFailureException(f"Reservation transaction cancelled: {error}")

    def _to_item(self, booking: Booking) -> dict:
        created_at = booking.created_at.isoformat()
        return {
            "PK": f"BOOKING#{booking.id}",
            "SK": "BOOKING",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "user_id": str(booking.user_id),
            "room_id": str(booking.room_id),
            "hotel_id": str(booking.hotel_id),
            "check_in_date": booking.stay_period.check_in.isoformat(),
            "check_out_date": booking.stay_period.check_out.isoformat(),
            "number_of_rooms": booking.number_of_rooms,
            "cost_amount": str(booking.cost.amount),
            "cost_currency": str(booking.cost.currency),
            "created_at": created_at,
            "updated_at": booking.updated_at.isoformat(),
            "version": booking.version,
            "GSI1PK": f"USER#{booking.user_id}",
            "GSI1SK": f"BOOKING#{created_at}#{booking.id}",
        }

    def _to_room(self, item: dict) -> Room:
        return Room(
            id=RoomId(item["room_id"]),
            hotel_id=HotelId(item["hotel_id"]),
            name=item["name"],
            price=Money(
                amount=Decimal(str(item["price_amount"])),
                currency=Currency(item["price_currency"]),
            ),
            capacity=int(item["capacity"]),
            number_available=int(item["number_available"]),
        )

    def _to_booking(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(item["booking_id"]),
            user_id=UserId(item["user_id"]),
            room_id=RoomId(item["room_id"]),
            hotel_id=HotelId(item["hotel_id"]),
            stay_period=StayPeriod(
                check_in=_parse_date(item["check_in_date"]),
                check_out=_parse_date(item["check_out_date"]),
            ),
            number_of_rooms=int(item["number_of_rooms"]),
            cost=Money(
                amount=Decimal(str(item["cost_amount"])),
                currency=Currency(item["cost_currency"]),
            ),
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
            version=int(item["version"]),
        )

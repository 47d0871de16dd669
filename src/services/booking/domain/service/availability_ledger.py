from services.booking.domain.entity import Room
from services.booking.domain.enum import AdmissionPolicy
from services.booking.domain.repository import ReservationStore
from services.booking.domain.value_object import (
    AdjustmentOutcome,
    Applied,
    LedgerAdjustment,
    Rejected,
    RoomId,
    StoreFailed,
)
from services.shared.domain import (
    BusinessRuleViolationException,
    InsufficientInventoryException,
    ResourceNotFoundException,
    StoreFailureException,
)
from services.shared.utils import get_logger

logger = get_logger()


class AvailabilityLedger:
    """空室数（在庫台帳）を扱う唯一の窓口

    読み込んだ Room に対する判定は早期リジェクト用で、
    最終的な判定は LedgerAdjustment の範囲条件としてストアが書き込み時に行う。
    """

    def __init__(
        self,
        store: ReservationStore,
        admission_policy: AdmissionPolicy = AdmissionPolicy.STRICT,
    ) -> None:
        self._store = store
        self._admission_policy = admission_policy

    @property
    def admission_policy(self) -> AdmissionPolicy:
        return self._admission_policy

    def admit(self, room: Room, number_of_rooms: int) -> LedgerAdjustment:
        """新規予約の受け付け判定を行い、引き当て用の差分を返す"""
        adjustment = LedgerAdjustment(
            room_id=room.id,
            delta=-number_of_rooms,
            capacity=room.capacity,
            floor=self._admission_policy.minimum_remaining,
        )
        if not adjustment.permits(room.number_available):
            raise InsufficientInventoryException(
                f"Room {room.id} has {room.number_available} rooms available, "
                f"which is not enough for a booking of {number_of_rooms}"
            )
        return adjustment

    def rebook(
        self,
        old_room: Room,
        old_number_of_rooms: int,
        new_room: Room,
        new_number_of_rooms: int,
    ) -> list[LedgerAdjustment]:
        """予約変更の差分（旧予約分を戻し、新予約分を引き当てる）を返す

        同じ部屋なら 1 件の正味差分にまとめる。変更時は 0 まで引き当てられる。
        """
        if old_room.id == new_room.id:
            adjustments = [
                LedgerAdjustment(
                    room_id=new_room.id,
                    delta=old_number_of_rooms - new_number_of_rooms,
                    capacity=new_room.capacity,
                )
            ]
            current = {new_room.id: new_room.number_available}
        else:
            adjustments = [
                LedgerAdjustment(
                    room_id=old_room.id,
                    delta=old_number_of_rooms,
                    capacity=old_room.capacity,
                ),
                LedgerAdjustment(
                    room_id=new_room.id,
                    delta=-new_number_of_rooms,
                    capacity=new_room.capacity,
                ),
            ]
            current = {
                old_room.id: old_room.number_available,
                new_room.id: new_room.number_available,
            }

        for adjustment in adjustments:
            # 範囲外なら InsufficientInventory / CapacityExceeded
            adjustment.applied_to(current[adjustment.room_id])
        return adjustments

    def release(self, room: Room, number_of_rooms: int) -> LedgerAdjustment:
        """予約の取り消し分を戻す差分を返す"""
        adjustment = LedgerAdjustment(
            room_id=room.id, delta=number_of_rooms, capacity=room.capacity
        )
        adjustment.applied_to(room.number_available)
        return adjustment

    def adjust(self, room_id: RoomId, delta: int) -> AdjustmentOutcome:
        """空室数に差分を単体でアトミックに適用する"""
        try:
            room = self._store.find_room(room_id)
            if room is None:
                raise ResourceNotFoundException("Room", room_id)
            adjustment = LedgerAdjustment(
                room_id=room_id, delta=delta, capacity=room.capacity
            )
            number_available = self._store.adjust_availability(adjustment)
        except (ResourceNotFoundException, BusinessRuleViolationException) as e:
            logger.warning(
                "Ledger adjustment rejected",
                extra={"room_id": str(room_id), "delta": delta, "reason": str(e)},
            )
            return Rejected(room_id=room_id, reason=str(e))
        except StoreFailureException as e:
            logger.exception(
                "Ledger adjustment failed",
                extra={"room_id": str(room_id), "delta": delta},
            )
            return StoreFailed(room_id=room_id, reason=str(e))

        return Applied(room_id=room_id, number_available=number_available)

from datetime import date

from pydantic import BaseModel, Field


class BookingRequest(BaseModel):
    """予約作成・変更リクエストモデル"""

    room_id: str = Field(..., min_length=1, description="部屋ID")
    check_in_date: date = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2024-01-01"],
    )
    check_out_date: date = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2024-01-04"],
    )
    number_of_rooms: int = Field(..., gt=0, description="部屋数")


class CreateBookingRequest(BookingRequest):
    """予約作成リクエストモデル"""


class UpdateBookingRequest(BookingRequest):
    """予約変更リクエストモデル"""

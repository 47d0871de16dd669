from .booking import Booking
from .hotel import Hotel
from .room import Room
from .user import User

__all__ = ["Booking", "Hotel", "Room", "User"]

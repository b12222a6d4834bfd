"""列舉值與網站表單整數代碼的對照

列舉的宣告順序不代表表單代碼，所有代碼一律由此處的對照表決定。
"""
from enum import Enum
from typing import Dict, Mapping, Type, TypeVar

from .enums import CabinClass, SeatPreference, Station, TripType

E = TypeVar('E', bound=Enum)


STATION_CODES: Mapping[Station, int] = {
    Station.Nangang: 1,
    Station.Taipei: 2,
    Station.Banqiao: 3,
    Station.Taoyuan: 4,
    Station.Hsinchu: 5,
    Station.Miaoli: 6,
    Station.Taichung: 7,
    Station.Changhua: 8,
    Station.Yunlin: 9,
    Station.Chiayi: 10,
    Station.Tainan: 11,
    Station.Zuoying: 12,
}

TRIP_TYPE_CODES: Mapping[TripType, int] = {
    TripType.ONE_WAY: 0,
    TripType.ROUND_TRIP: 1,
}

CABIN_CLASS_CODES: Mapping[CabinClass, int] = {
    CabinClass.STANDARD: 0,
    CabinClass.BUSINESS: 1,
}

SEAT_PREFERENCE_CODES: Mapping[SeatPreference, int] = {
    SeatPreference.NO_PREFERENCE: 0,
    SeatPreference.WINDOW: 1,
    SeatPreference.AISLE: 2,
}

_TABLES: Dict[type, Mapping] = {
    Station: STATION_CODES,
    TripType: TRIP_TYPE_CODES,
    CabinClass: CABIN_CLASS_CODES,
    SeatPreference: SEAT_PREFERENCE_CODES,
}


def encode_ordinal(value: Enum) -> int:
    return _TABLES[type(value)][value]


def decode_ordinal(enum_cls: Type[E], code: int) -> E:
    """將表單代碼轉回列舉值

    Raises:
        ValueError: 代碼不在對照表中
    """
    for member, member_code in _TABLES[enum_cls].items():
        if member_code == code:
            return member
    raise ValueError(f'無效的 {enum_cls.__name__} 代碼: {code}')

from enum import Enum


class Station(Enum):
    Nangang = 'Nangang'
    Taipei = 'Taipei'
    Banqiao = 'Banqiao'
    Taoyuan = 'Taoyuan'
    Hsinchu = 'Hsinchu'
    Miaoli = 'Miaoli'
    Taichung = 'Taichung'
    Changhua = 'Changhua'
    Yunlin = 'Yunlin'
    Chiayi = 'Chiayi'
    Tainan = 'Tainan'
    Zuoying = 'Zuoying'


class TripType(Enum):
    ONE_WAY = 'one_way'
    ROUND_TRIP = 'round_trip'


class CabinClass(Enum):
    STANDARD = 'standard'
    BUSINESS = 'business'


class SeatPreference(Enum):
    NO_PREFERENCE = 'no_preference'
    WINDOW = 'window'
    AISLE = 'aisle'


class TicketType(Enum):
    ADULT = 'adult'
    CHILD = 'child'
    DISABLED = 'disabled'
    ELDER = 'elder'
    COLLEGE = 'college'

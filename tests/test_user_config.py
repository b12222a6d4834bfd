import pytest

from thsr_booking.configs.user_config import (
    is_time_slot,
    normalize_date,
    parse_station,
    system_format_to_time,
    time_to_system_format,
)
from thsr_booking.configs.web.enums import Station


@pytest.mark.parametrize('value, expected', [
    ('南港', Station.Nangang),
    ('Zuoying', Station.Zuoying),
    ('7', Station.Taichung),
    (3, Station.Banqiao),
    (Station.Chiayi, Station.Chiayi),
])
def test_parse_station(value, expected) -> None:
    assert parse_station(value) is expected


def test_parse_station_invalid() -> None:
    with pytest.raises(ValueError, match='無效的車站名稱'):
        parse_station('高雄')


@pytest.mark.parametrize('time_str, system_time', [
    ('00:30', '1230A'),
    ('06:00', '600A'),
    ('09:30', '930A'),
    ('11:30', '1130A'),
    ('12:00', '1200N'),
    ('12:30', '1230P'),
    ('23:30', '1130P'),
])
def test_time_conversion(time_str: str, system_time: str) -> None:
    assert time_to_system_format(time_str) == system_time
    assert system_format_to_time(system_time) == time_str
    assert is_time_slot(system_time)


def test_time_must_be_offered() -> None:
    assert time_to_system_format('09:30', ['930A']) == '930A'
    with pytest.raises(ValueError, match='不在可用時間表中'):
        time_to_system_format('10:00', ['930A'])


@pytest.mark.parametrize('token', ['', '930', '0930A', '1300P', '960A', '930X'])
def test_is_not_time_slot(token: str) -> None:
    assert not is_time_slot(token)


def test_normalize_date() -> None:
    assert normalize_date('2025-1-21') == '2025/01/21'
    assert normalize_date('2025/01/21') == '2025/01/21'
    with pytest.raises(ValueError):
        normalize_date('2025/13/01')

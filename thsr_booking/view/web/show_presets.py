from typing import List

from thsr_booking.configs.user_config import (
    CABIN_CLASS_NAME_MAP,
    STATION_CHINESE_NAME,
    TICKET_TYPE_NAME_MAP,
    system_format_to_time,
)
from thsr_booking.configs.web.param_schema import Preset
from thsr_booking.view.web.abstract_show import AbstractShow


class ShowPresets(AbstractShow):
    def show(self, presets: List[Preset]) -> None:
        for number, preset in enumerate(presets, 1):
            self.show_one(number, preset)

    def show_one(self, number: int, preset: Preset) -> None:
        booking = preset.booking
        tickets = '、'.join(
            f'{TICKET_TYPE_NAME_MAP[ticket_type]} {count} 張'
            for ticket_type, count in booking.ticket_counts()
            if count
        )
        print(
            f'({number}) {STATION_CHINESE_NAME[booking.start_station]} → '
            f'{STATION_CHINESE_NAME[booking.dest_station]} '
            f'{booking.outbound_date} {system_format_to_time(booking.outbound_time)} '
            f'{CABIN_CLASS_NAME_MAP[booking.class_type]} {tickets} '
            f'取票人：{preset.ticket_confirmation.personal_id}'
        )

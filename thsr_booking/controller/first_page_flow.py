import logging
from datetime import timedelta
from typing import Optional, Tuple

from requests.models import Response

from thsr_booking.remote.http_request import HTTPRequest
from thsr_booking.configs.web.param_schema import (
    TICKET_COUNT_FIELDS,
    BookingDraft,
    BookingFormParams,
    BookingModel,
)
from thsr_booking.configs.web.enums import CabinClass, SeatPreference, Station, TicketType
from thsr_booking.configs.common import DAYS_BEFORE_BOOKING_AVAILABLE, MAX_TICKET_NUM
from thsr_booking.configs.user_config import (
    CABIN_CLASS_NAME_MAP,
    SEAT_PREFERENCE_NAME_MAP,
    STATION_CHINESE_NAME,
    TICKET_TYPE_NAME_MAP,
    normalize_date,
    system_format_to_time,
    today,
)
from thsr_booking.configs.web.field_codec import CANONICAL_TICKET_ORDER
from thsr_booking.configs.web.ordinal_codec import STATION_CODES, decode_ordinal
from thsr_booking.errors import MalformedDocument
from thsr_booking.view_model.booking_page import BookingPage

logger = logging.getLogger(__name__)

DEFAULT_TICKET_NUM = {
    TicketType.ADULT: 1,
}


class FirstPageFlow:
    def __init__(self, client: HTTPRequest, draft: Optional[BookingDraft] = None) -> None:
        self.client = client
        self.draft = draft

    def open_session(self) -> Tuple[BookingFormParams, bytes]:
        """載入訂票頁面，取得連線參數與驗證碼圖片"""
        book_resp = self.client.request_booking_page()
        params = BookingPage().parse(book_resp.content)
        params = params.model_copy(update={'session_id': self.client.session_id(book_resp)})
        logger.debug('JSESSIONID: %s', params.session_id)
        img_resp = self.client.request_security_code_img(params.captcha_url).content
        return params, img_resp

    def prepare_draft(self, params: BookingFormParams) -> BookingDraft:
        if self.draft is not None:
            return self.draft

        # First page. Booking options
        self.draft = BookingDraft(
            start_station=self.select_station('啟程', default_value=Station.Nangang),
            dest_station=self.select_station('到達', default_value=Station.Zuoying),
            outbound_date=self.select_date('出發'),
            outbound_time=self.select_time(params),
            seat_prefer=self.select_seat(),
            class_type=self.select_class(),
            **{
                TICKET_COUNT_FIELDS[ticket_type]: self.select_ticket_num(
                    ticket_type, DEFAULT_TICKET_NUM.get(ticket_type, 0)
                )
                for ticket_type in CANONICAL_TICKET_ORDER
            },
        )
        return self.draft

    def submit(
        self, draft: BookingDraft, params: BookingFormParams, security_code: str
    ) -> Tuple[Response, BookingModel]:
        if draft.outbound_time not in params.time_options:
            logger.warning('time slot %s is not offered by the booking page', draft.outbound_time)

        book_model = BookingModel.from_draft(draft, params, security_code)
        resp = self.client.submit_booking_form(params.session_id, book_model.to_form())
        return resp, book_model

    def select_station(self, travel_type: str, default_value: Station = Station.Taipei) -> Station:
        print(f'選擇{travel_type}站：')
        for station, code in STATION_CODES.items():
            print(f'{code}. {STATION_CHINESE_NAME[station]}')

        selected = _input_choice(len(STATION_CODES), STATION_CODES[default_value])
        return decode_ordinal(Station, selected)

    def select_date(self, date_type: str) -> str:
        first_avail_date = today()
        last_avail_date = first_avail_date + timedelta(days=DAYS_BEFORE_BOOKING_AVAILABLE)
        print(f'選擇{date_type}日期（{first_avail_date}~{last_avail_date}）（預設為今日）：')
        return normalize_date(input() or first_avail_date)

    def select_time(self, params: BookingFormParams, default_value: int = 10) -> str:
        time_options = params.time_options
        if not time_options:
            raise MalformedDocument('訂票頁面沒有可選擇的出發時間')

        default_value = min(default_value, len(time_options))
        print('選擇出發時間：')
        for idx, t_str in enumerate(time_options, 1):
            print(f'{idx}. {system_format_to_time(t_str)}')

        return time_options[_input_choice(len(time_options), default_value) - 1]

    def select_seat(self) -> SeatPreference:
        return _select_option('座位偏好', list(SeatPreference), SEAT_PREFERENCE_NAME_MAP)

    def select_class(self) -> CabinClass:
        return _select_option('車廂種類', list(CabinClass), CABIN_CLASS_NAME_MAP)

    def select_ticket_num(self, ticket_type: TicketType, default_ticket_num: int = 1) -> int:
        ticket_type_name = TICKET_TYPE_NAME_MAP.get(ticket_type, ticket_type.name)

        print(f'選擇{ticket_type_name}票數（0~{MAX_TICKET_NUM}）（預設：{default_ticket_num}）')
        return int(input() or default_ticket_num)


def _input_choice(count: int, default_value: int = 1) -> int:
    """讀取 1~count 的選項編號，超出範圍時重新輸入"""
    while True:
        selected = input(f'輸入選擇（預設：{default_value}）：').strip()
        if not selected:
            return default_value
        if selected.isdigit() and 1 <= int(selected) <= count:
            return int(selected)
        print(f'請輸入 1~{count}')


def _select_option(title: str, options: list, names: dict):
    print(f'選擇{title}：')
    for idx, option in enumerate(options, 1):
        print(f'{idx}. {names[option]}')
    return options[_input_choice(len(options)) - 1]

from typing import Union

from thsr_booking.configs.web.param_schema import ConfirmationSummary
from thsr_booking.configs.web.parse_html_element import BOOKING_RESULT, CABIN_INFO_TITLE
from thsr_booking.errors import MalformedDocument
from thsr_booking.view_model.abstract_view_model import AbstractViewModel
from thsr_booking.view_model.document import Element


class BookingResult(AbstractViewModel):
    def parse(self, html: Union[bytes, str, Element]) -> ConfirmationSummary:
        page = self._parser(html)
        fields = {
            name: self._require(page, BOOKING_RESULT[name]).text()
            for name in (
                'ticket_id',
                'total_price',
                'date',
                'from_station',
                'to_station',
                'depart_time',
                'arrive_time',
                'train_code',
            )
        }
        return ConfirmationSummary(
            **fields,
            cabin_label=self._parse_cabin_label(page),
            seat_labels=[elem.text() for elem in page.select(BOOKING_RESULT['seat_labels'])],
        )

    def _parse_cabin_label(self, page: Element) -> str:
        title = next(
            (elem for elem in page.select(BOOKING_RESULT['info_title']) if elem.text() == CABIN_INFO_TITLE),
            None,
        )
        if title is None:
            raise MalformedDocument(f'找不到「{CABIN_INFO_TITLE}」資訊')
        value = title.next_sibling_element()
        if value is None:
            raise MalformedDocument(f'「{CABIN_INFO_TITLE}」資訊缺少內容')
        return self._require(value, BOOKING_RESULT['info_value']).text()

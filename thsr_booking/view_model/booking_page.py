import logging
from typing import Union

from thsr_booking.configs.common import BASE_URL
from thsr_booking.configs.web.param_schema import BookingFormParams
from thsr_booking.configs.web.parse_html_element import BOOKING_PAGE
from thsr_booking.errors import MalformedDocument
from thsr_booking.view_model.abstract_view_model import AbstractViewModel
from thsr_booking.view_model.document import Element

logger = logging.getLogger(__name__)


class BookingPage(AbstractViewModel):
    def parse(self, html: Union[bytes, str, Element]) -> BookingFormParams:
        page = self._parser(html)
        search_by = self._require_attr(self._require(page, BOOKING_PAGE['search_by_time']), 'value')
        time_options = [
            self._require_attr(option, 'value')
            for option in page.select(BOOKING_PAGE['time_options'])
        ]
        if not time_options:
            raise MalformedDocument('訂票頁面沒有可選擇的出發時間')
        img_src = self._require_attr(self._require(page, BOOKING_PAGE['security_code_img']), 'src')
        logger.debug('search-by-time: %s, time options: %s', search_by, time_options)
        return BookingFormParams(
            search_by_time_value=search_by,
            time_options=time_options,
            captcha_url=BASE_URL + img_src,
        )

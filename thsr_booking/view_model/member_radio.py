from typing import Union

from thsr_booking.configs.web.parse_html_element import MEMBER_RADIO
from thsr_booking.view_model.abstract_view_model import AbstractViewModel
from thsr_booking.view_model.document import Element


class MemberRadio(AbstractViewModel):
    """第三頁預先勾選的會員選項值"""

    def parse(self, html: Union[bytes, str, Element]) -> str:
        page = self._parser(html)
        return self._require_attr(self._require(page, MEMBER_RADIO), 'value')

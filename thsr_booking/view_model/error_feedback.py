from typing import List, Union

from thsr_booking.configs.web.parse_html_element import ERROR_FEEDBACK
from thsr_booking.errors import ValidationRejected
from thsr_booking.view_model.abstract_view_model import AbstractViewModel
from thsr_booking.view_model.document import Element


class ErrorFeedback(AbstractViewModel):
    def parse(self, html: Union[bytes, str, Element]) -> List[str]:
        """回傳頁面中的錯誤訊息，沒有錯誤時回傳空串列"""
        page = self._parser(html)
        return [elem.text() for elem in page.select(ERROR_FEEDBACK)]

    def assert_no_errors(self, html: Union[bytes, str, Element]) -> None:
        if errors := self.parse(html):
            raise ValidationRejected(errors)

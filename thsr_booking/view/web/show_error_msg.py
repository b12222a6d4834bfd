from typing import List

from thsr_booking.view.web.abstract_show import AbstractShow


class ShowErrorMsg(AbstractShow):
    def show(self, errors: List[str]) -> None:
        for err in errors:
            print(f'錯誤：{err}')

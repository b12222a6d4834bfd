import logging
from typing import List, Union

from thsr_booking.view_model.abstract_view_model import AbstractViewModel
from thsr_booking.view_model.document import Element
from thsr_booking.configs.web.parse_avail_train import ParseAvailTrain
from thsr_booking.configs.web.param_schema import Train
from thsr_booking.errors import MalformedDocument

logger = logging.getLogger(__name__)


class AvailTrains(AbstractViewModel):
    def __init__(self) -> None:
        super(AvailTrains, self).__init__()
        self.avail_trains: List[Train] = []
        self.cond = ParseAvailTrain()

    def parse(self, html: Union[bytes, str, Element]) -> List[Train]:
        page = self._parser(html)
        avail = page.select(self.cond.from_html)
        return self._parse_train(avail)

    def _parse_train(self, avail: List[Element]) -> List[Train]:
        for item in avail:
            train_id = self._require(item, self.cond.train_id).text()
            try:
                train_id_num = int(train_id)
            except ValueError:
                raise MalformedDocument(f'無效的車次: {train_id!r}') from None
            self.avail_trains.append(
                Train(
                    id=train_id_num,
                    depart=self._require(item, self.cond.depart).text(),
                    arrive=self._require(item, self.cond.arrival).text(),
                    travel_time=self._require(item, self.cond.duration).text(),
                    discount_str=self._parse_discount(item),
                    form_value=self._require_attr(self._require(item, self.cond.form_value), 'value'),
                )
            )
        logger.debug('parsed %d trains', len(self.avail_trains))
        return self.avail_trains

    def _parse_discount(self, item: Element) -> str:
        discounts = []
        if tag := item.select_one(self.cond.early_bird_discount):
            discounts.append(tag.text())
        if tag := item.select_one(self.cond.college_student_discount):
            discounts.append(tag.text())
        return ', '.join(discounts)

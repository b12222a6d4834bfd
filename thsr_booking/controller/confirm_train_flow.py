import logging
from typing import Callable, List, Optional, Tuple

from requests.models import Response

from thsr_booking.remote.http_request import HTTPRequest
from thsr_booking.view.web.show_avail_trains import ShowAvailTrains
from thsr_booking.configs.web.param_schema import ConfirmTrainModel, Train

logger = logging.getLogger(__name__)

TrainSelector = Callable[[List[Train]], int]


class ConfirmTrainFlow:
    def __init__(
        self,
        client: HTTPRequest,
        trains: List[Train],
        train_selector: Optional[TrainSelector] = None,
    ) -> None:
        self.client = client
        self.trains = trains
        self.train_selector = train_selector or self.select_train

    def run(self) -> Tuple[Response, ConfirmTrainModel]:
        selection = self.train_selector(self.trains)
        selected_train = self.trains[selection]
        logger.info('selected train %s (%s~%s)', selected_train.id, selected_train.depart, selected_train.arrive)

        confirm_model = ConfirmTrainModel(selected_train=selected_train.form_value)
        resp = self.client.submit_train(confirm_model.to_form())
        return resp, confirm_model

    def select_train(self, trains: List[Train]) -> int:
        """請使用者選擇班次，回傳 0 起算的索引（預設第一班）"""
        return ShowAvailTrains().show(trains, select=True, default_value=1) - 1

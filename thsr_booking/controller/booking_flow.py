"""訂票流程控制器

依序完成：載入訂票頁面 → 輸入驗證碼 → 送出訂票條件 → 選擇班次 → 填寫取票資訊。
各步驟所需的參數（JSESSIONID、時段、會員選項）只在上一步的回應中有效，
因此流程不可重來，也不可跳過任何步驟。
"""
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterator, List, Optional

from thsr_booking.configs.web.param_schema import (
    BookingDraft,
    BookingFormParams,
    ConfirmationSummary,
    PassengerIdentityRecord,
    Preset,
    Train,
)
from thsr_booking.controller.captcha_helper import input_captcha
from thsr_booking.controller.confirm_ticket_flow import ConfirmTicketFlow
from thsr_booking.controller.confirm_train_flow import ConfirmTrainFlow, TrainSelector
from thsr_booking.controller.first_page_flow import FirstPageFlow
from thsr_booking.errors import MalformedDocument, WorkflowStateError
from thsr_booking.remote.http_request import HTTPRequest
from thsr_booking.view_model.avail_trains import AvailTrains
from thsr_booking.view_model.booking_result import BookingResult
from thsr_booking.view_model.error_feedback import ErrorFeedback
from thsr_booking.view_model.member_radio import MemberRadio

logger = logging.getLogger(__name__)

CaptchaSolver = Callable[[bytes], str]


class FlowState(Enum):
    INIT = 'init'
    CAPTCHA_PENDING = 'captcha_pending'
    BOOKING_READY = 'booking_ready'
    TRAINS_LISTED = 'trains_listed'
    CONFIRMATION_READY = 'confirmation_ready'
    DONE = 'done'
    ABORTED = 'aborted'


class BookingFlow:
    def __init__(
        self,
        client: Optional[HTTPRequest] = None,
        preset: Optional[Preset] = None,
        captcha_solver: Optional[CaptchaSolver] = None,
        train_selector: Optional[TrainSelector] = None,
    ) -> None:
        self.client = client or HTTPRequest()
        self.captcha_solver = captcha_solver or input_captcha
        self.train_selector = train_selector
        self.error_feedback = ErrorFeedback()

        self.state = FlowState.INIT
        self.booking_draft: Optional[BookingDraft] = preset.booking if preset else None
        self.identity_record: Optional[PassengerIdentityRecord] = (
            preset.ticket_confirmation if preset else None
        )

        self.form_params: Optional[BookingFormParams] = None
        self.captcha_img: Optional[bytes] = None
        self.security_code: Optional[str] = None
        self.trains: List[Train] = []
        self.member_radio: Optional[str] = None
        self.summary: Optional[ConfirmationSummary] = None

    def run(self) -> ConfirmationSummary:
        self.start_session()
        self.solve_captcha()
        self.submit_booking()
        self.select_train()
        return self.confirm_ticket()

    def start_session(self) -> BookingFormParams:
        with self._stage(FlowState.INIT):
            print('請稍等...')
            self.form_params, self.captcha_img = FirstPageFlow(self.client).open_session()
        self.state = FlowState.CAPTCHA_PENDING
        return self.form_params

    def solve_captcha(self) -> str:
        with self._stage(FlowState.CAPTCHA_PENDING):
            self.security_code = self.captcha_solver(self.captcha_img)
            logger.debug('captcha solution entered: %s', self.security_code)
        self.state = FlowState.BOOKING_READY
        return self.security_code

    def submit_booking(self) -> List[Train]:
        with self._stage(FlowState.BOOKING_READY):
            first_page = FirstPageFlow(self.client, self.booking_draft)
            self.booking_draft = first_page.prepare_draft(self.form_params)
            logger.debug('booking draft: %s', self.booking_draft)

            book_resp, _ = first_page.submit(self.booking_draft, self.form_params, self.security_code)
            self.error_feedback.assert_no_errors(book_resp.content)

            self.trains = AvailTrains().parse(book_resp.content)
            if not self.trains:
                raise MalformedDocument('沒有可用的班次！')
        self.state = FlowState.TRAINS_LISTED
        return self.trains

    def select_train(self) -> str:
        with self._stage(FlowState.TRAINS_LISTED):
            train_resp, _ = ConfirmTrainFlow(self.client, self.trains, self.train_selector).run()
            self.error_feedback.assert_no_errors(train_resp.content)
            self.member_radio = MemberRadio().parse(train_resp.content)
        self.state = FlowState.CONFIRMATION_READY
        return self.member_radio

    def confirm_ticket(self) -> ConfirmationSummary:
        with self._stage(FlowState.CONFIRMATION_READY):
            ticket_flow = ConfirmTicketFlow(self.client, self.booking_draft, self.identity_record)
            ticket_resp, _ = ticket_flow.run(self.member_radio)
            self.identity_record = ticket_flow.record
            self.error_feedback.assert_no_errors(ticket_resp.content)
            self.summary = BookingResult().parse(ticket_resp.content)
        self.state = FlowState.DONE
        return self.summary

    def as_preset(self) -> Preset:
        """將本次輸入的資料組成預設，供下次使用"""
        self._expect(FlowState.DONE)
        return Preset(booking=self.booking_draft, ticket_confirmation=self.identity_record)

    @contextmanager
    def _stage(self, state: FlowState) -> Iterator[None]:
        # 任一步驟失敗後流程即中止，不可從中途重試
        self._expect(state)
        try:
            yield
        except BaseException:
            self.state = FlowState.ABORTED
            raise

    def _expect(self, state: FlowState) -> None:
        if self.state is not state:
            raise WorkflowStateError(f'目前步驟為 {self.state.value}，無法執行 {state.value} 步驟')

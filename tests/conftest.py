from types import SimpleNamespace
from typing import Any, Dict, List, Mapping, Tuple

import pytest


BOOKING_PAGE_HTML = """
<html><body>
<form id="BookingS1Form">
  <input type="radio" name="bookingMethod" value="radio17" data-target="search-by-time" checked="checked"/>
  <input type="radio" name="bookingMethod" value="radio19" data-target="search-by-trainNo"/>
  <select name="toTimeTable">
    <option value="" selected="selected">--</option>
    <option value="600A">06:00</option>
    <option value="930A">09:30</option>
    <option value="1200N">12:00</option>
    <option value="1130P">23:30</option>
  </select>
  <img id="BookingS1Form_homeCaptcha_passCode" src="/IMINT/?wicket:interface=:0:BookingS1Form:homeCaptcha:passCode::IResourceListener"/>
</form>
</body></html>
"""

TRAINS_HTML = """
<html><body>
<form id="BookingS2Form">
  <label class="result-item">
    <input type="radio" name="TrainQueryDataViewPanel:TrainGroup" value="radio18"/>
    <div class="train-code"><span id="QueryCode">803</span></div>
    <div class="departure"><span id="QueryDeparture">09:46</span></div>
    <div class="duration"><span class="material-icons">schedule</span><span>01:45</span></div>
    <div class="arrival"><span id="QueryArrival">11:31</span></div>
    <div class="discount"><p class="early-bird">Early Bird</p></div>
  </label>
  <label class="result-item">
    <input type="radio" name="TrainQueryDataViewPanel:TrainGroup" value="radio24"/>
    <div class="train-code"><span id="QueryCode">1311</span></div>
    <div class="departure"><span id="QueryDeparture">10:11</span></div>
    <div class="duration"><span class="material-icons">schedule</span><span>02:00</span></div>
    <div class="arrival"><span id="QueryArrival">12:11</span></div>
  </label>
</form>
</body></html>
"""

PASSENGER_PAGE_HTML = """
<html><body>
<form id="BookingS3Form">
  <input type="radio" name="TicketMemberSystemInputPanel:TakerMemberSystemDataView:memberSystemRadioGroup" value="radio56" checked="checked"/>
  <input type="radio" name="TicketMemberSystemInputPanel:TakerMemberSystemDataView:memberSystemRadioGroup" value="radio58"/>
</form>
</body></html>
"""

RESULT_HTML = """
<html><body>
<p class="pnr-code"><span>08154321</span><span>訂位代號</span></p>
<span id="setTrainTotalPriceValue">TWD 2,245</span>
<span class="date"><span>01/21</span></span>
<p class="departure-stn"><span>南港</span></p>
<p class="arrival-stn"><span>左營</span></p>
<span id="setTrainDeparture0">09:46</span>
<span id="setTrainArrival0">11:31</span>
<span id="setTrainCode0">803</span>
<div class="info-row"><p class="info-title">票數</p><p><span>2</span></p></div>
<div class="info-row"><p class="info-title">車廂</p><p><span>標準車廂</span></p></div>
<div class="seat-label"><span>7車12A</span></div>
<div class="seat-label"><span>7車12B</span></div>
</body></html>
"""

ERROR_HTML = """
<html><body>
<ul class="feedbackPanel">
  <li><span class="feedbackPanelERROR">檢測碼輸入錯誤，請確認後重新輸入</span></li>
  <li><span class="feedbackPanelERROR">去程查無可售車次或選購的車票已售完</span></li>
</ul>
</body></html>
"""


class FakeHTTPRequest:
    """以固定頁面回應的 HTTPRequest 替身"""

    def __init__(self, pages: Mapping[str, str], session_id: str = 'ABC123') -> None:
        self.pages = dict(pages)
        self._session_id = session_id
        self.calls: List[Tuple[str, Any]] = []
        self.closed = False

    def _resp(self, name: str) -> SimpleNamespace:
        return SimpleNamespace(content=self.pages[name].encode('utf-8'), status_code=200)

    def request_booking_page(self) -> SimpleNamespace:
        self.calls.append(('booking_page', None))
        return self._resp('booking_page')

    def session_id(self, resp: SimpleNamespace) -> str:
        return self._session_id

    def request_security_code_img(self, img_url: str) -> SimpleNamespace:
        self.calls.append(('captcha', img_url))
        return SimpleNamespace(content=b'\x89PNG fake', status_code=200)

    def submit_booking_form(self, session_id: str, params: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append(('booking', (session_id, params)))
        return self._resp('booking')

    def submit_train(self, params: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append(('train', params))
        return self._resp('train')

    def submit_ticket(self, params: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append(('ticket', params))
        return self._resp('ticket')

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> 'FakeHTTPRequest':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def submitted(self, name: str) -> Any:
        return next(payload for call, payload in self.calls if call == name)


@pytest.fixture
def fake_client() -> FakeHTTPRequest:
    return FakeHTTPRequest({
        'booking_page': BOOKING_PAGE_HTML,
        'booking': TRAINS_HTML,
        'train': PASSENGER_PAGE_HTML,
        'ticket': RESULT_HTML,
    })


@pytest.fixture
def preset_dict() -> Dict[str, Any]:
    return {
        'booking': {
            'start_station': 'Nangang',
            'dest_station': 'Zuoying',
            'outbound_date': '2025/01/21',
            'outbound_time': '930A',
            'seat_prefer': 'no_preference',
            'class_type': 'standard',
            'adult_ticket_num': 1,
            'child_ticket_num': 0,
            'disabled_ticket_num': 0,
            'elder_ticket_num': 1,
            'college_ticket_num': 0,
        },
        'ticket_confirmation': {
            'personal_id': 'A123456789',
            'phone_num': '0912345678',
            'passenger_ids': {
                'TicketPassengerInfoInputPanel:passengerDataView:1:passengerDataView2:passengerDataIdNumber': 'B223456789',
            },
        },
    }


@pytest.fixture
def html_pages() -> Dict[str, str]:
    return {
        'booking_page': BOOKING_PAGE_HTML,
        'trains': TRAINS_HTML,
        'passenger': PASSENGER_PAGE_HTML,
        'result': RESULT_HTML,
        'error': ERROR_HTML,
    }

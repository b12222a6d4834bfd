from typing import Any, Dict

import pytest
from pydantic import ValidationError

from thsr_booking.configs.web.enums import CabinClass, SeatPreference, Station, TicketType
from thsr_booking.configs.web.param_schema import (
    BookingDraft,
    BookingFormParams,
    BookingModel,
    ConfirmTicketModel,
    ConfirmTrainModel,
    PassengerIdentityRecord,
    Preset,
)


@pytest.fixture
def form_params() -> BookingFormParams:
    return BookingFormParams(
        session_id='ABC123',
        search_by_time_value='radio17',
        time_options=['600A', '930A'],
        captcha_url='https://irs.thsrc.com.tw/captcha',
    )


def test_draft_from_preset_fields(preset_dict: Dict[str, Any]) -> None:
    draft = BookingDraft.model_validate(preset_dict['booking'])

    assert draft.start_station is Station.Nangang
    assert draft.dest_station is Station.Zuoying
    assert draft.seat_prefer is SeatPreference.NO_PREFERENCE
    assert draft.class_type is CabinClass.STANDARD
    assert draft.ticket_counts() == [
        (TicketType.ADULT, 1),
        (TicketType.CHILD, 0),
        (TicketType.DISABLED, 0),
        (TicketType.ELDER, 1),
        (TicketType.COLLEGE, 0),
    ]
    assert draft.total_tickets() == 2


def test_draft_accepts_flexible_input() -> None:
    draft = BookingDraft(
        start_station='台北',
        dest_station=11,
        outbound_date='2025-01-21',
        outbound_time='13:30',
        adult_ticket_num='2F',
        elder_ticket_num='1E',
    )

    assert draft.start_station is Station.Taipei
    assert draft.dest_station is Station.Tainan
    assert draft.outbound_date == '2025/01/21'
    assert draft.outbound_time == '130P'
    assert draft.ticket_count(TicketType.ADULT) == 2
    assert draft.ticket_count(TicketType.ELDER) == 1


def test_draft_rejects_wrong_count_suffix() -> None:
    with pytest.raises(ValidationError, match='1F'):
        BookingDraft(
            start_station='Taipei',
            dest_station='Tainan',
            outbound_date='2025/01/21',
            outbound_time='930A',
            elder_ticket_num='1F',
        )


@pytest.mark.parametrize('changes', [
    {'dest_station': 'Nangang'},
    {'adult_ticket_num': 0},
    {'outbound_time': '9:30AM'},
    {'outbound_date': '21/01/2025'},
    {'start_station': 'Kaohsiung'},
])
def test_draft_validation_errors(changes: Dict[str, Any], preset_dict: Dict[str, Any]) -> None:
    fields = dict(preset_dict['booking'], elder_ticket_num=0, **changes)

    with pytest.raises(ValidationError):
        BookingDraft(**fields)


def test_booking_form_fields(preset_dict: Dict[str, Any], form_params: BookingFormParams) -> None:
    draft = BookingDraft.model_validate(preset_dict['booking'])
    form = BookingModel.from_draft(draft, form_params, 'XY7Z').to_form()

    assert form == {
        'selectStartStation': 1,
        'selectDestinationStation': 12,
        'toTimeInputField': '2025/01/21',
        'toTimeTable': '930A',
        'seatCon:seatRadioGroup': 0,
        'trainCon:trainRadioGroup': 0,
        'ticketPanel:rows:0:ticketAmount': '1F',
        'ticketPanel:rows:1:ticketAmount': '0H',
        'ticketPanel:rows:2:ticketAmount': '0W',
        'ticketPanel:rows:3:ticketAmount': '1E',
        'ticketPanel:rows:4:ticketAmount': '0P',
        'bookingMethod': 'radio17',
        'tripCon:typesoftrip': 0,
        'homeCaptcha:securityCode': 'XY7Z',
        'BookingS1Form:hf:0': '',
    }


def test_confirm_train_form() -> None:
    form = ConfirmTrainModel(selected_train='radio18').to_form()

    assert form == {'TrainQueryDataViewPanel:TrainGroup': 'radio18', 'BookingS2Form:hf:0': ''}


def test_confirm_ticket_form_flattens_passenger_ids() -> None:
    record = PassengerIdentityRecord(
        personal_id='A123456789',
        phone_num='0912345678',
        passenger_ids={'TicketPassengerInfoInputPanel:passengerDataView:1:passengerDataView2:passengerDataIdNumber': 'B223456789'},
    )
    form = ConfirmTicketModel.from_record(record, 'radio56').to_form()

    assert form['dummyId'] == 'A123456789'
    assert form['dummyPhone'] == '0912345678'
    assert form['TicketMemberSystemInputPanel:TakerMemberSystemDataView:memberSystemRadioGroup'] == 'radio56'
    assert form['TicketPassengerInfoInputPanel:passengerDataView:1:passengerDataView2:passengerDataIdNumber'] == 'B223456789'
    assert form['agree'] == 'on'
    assert form['diffOver'] == 1
    assert form['TgoError'] == 1
    assert form['idInputRadio'] == 0
    assert 'passenger_ids' not in form


def test_preset_dump_uses_readable_names(preset_dict: Dict[str, Any]) -> None:
    preset = Preset.model_validate(preset_dict)

    assert preset.model_dump(mode='json') == preset_dict

import json
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from thsr_booking.configs.common import MAX_TICKET_NUM
from thsr_booking.configs.user_config import is_time_slot, normalize_date, parse_station, time_to_system_format
from .enums import CabinClass, SeatPreference, Station, TicketType, TripType
from .field_codec import (
    CANONICAL_TICKET_ORDER,
    TICKET_SUFFIX,
    decode_ticket_count,
    encode_ticket_count,
    ticket_amount_field,
)
from .ordinal_codec import encode_ordinal


TICKET_COUNT_FIELDS: Mapping[TicketType, str] = {
    TicketType.ADULT: 'adult_ticket_num',
    TicketType.CHILD: 'child_ticket_num',
    TicketType.DISABLED: 'disabled_ticket_num',
    TicketType.ELDER: 'elder_ticket_num',
    TicketType.COLLEGE: 'college_ticket_num',
}
_FIELD_TICKET_TYPES = {field: ticket_type for ticket_type, field in TICKET_COUNT_FIELDS.items()}

MEMBER_RADIO_FIELD = 'TicketMemberSystemInputPanel:TakerMemberSystemDataView:memberSystemRadioGroup'
TRAIN_GROUP_FIELD = 'TrainQueryDataViewPanel:TrainGroup'


class BookingDraft(BaseModel):
    """可重複使用的訂票條件（第一頁表單中由使用者決定的部分）"""

    model_config = ConfigDict(frozen=True)

    start_station: Station
    dest_station: Station
    outbound_date: str
    outbound_time: str
    seat_prefer: SeatPreference = SeatPreference.NO_PREFERENCE
    class_type: CabinClass = CabinClass.STANDARD
    adult_ticket_num: int = Field(1, ge=0, le=MAX_TICKET_NUM)
    child_ticket_num: int = Field(0, ge=0, le=MAX_TICKET_NUM)
    disabled_ticket_num: int = Field(0, ge=0, le=MAX_TICKET_NUM)
    elder_ticket_num: int = Field(0, ge=0, le=MAX_TICKET_NUM)
    college_ticket_num: int = Field(0, ge=0, le=MAX_TICKET_NUM)

    @field_validator('start_station', 'dest_station', mode='before')
    @classmethod
    def _parse_station(cls, value: Any) -> Station:
        return parse_station(value)

    @field_validator('outbound_date', mode='before')
    @classmethod
    def _normalize_date(cls, value: Any) -> str:
        return normalize_date(value)

    @field_validator('outbound_time', mode='before')
    @classmethod
    def _normalize_time(cls, value: Any) -> Any:
        # 接受 "09:30" 或網站的時段代碼 "930A"
        if isinstance(value, str) and ':' in value:
            return time_to_system_format(value)
        if not isinstance(value, str) or not is_time_slot(value):
            raise ValueError(f'無效的時段: {value!r}')
        return value

    @field_validator(*TICKET_COUNT_FIELDS.values(), mode='before')
    @classmethod
    def _decode_count(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str) and not value.isdigit():
            suffix = TICKET_SUFFIX[_FIELD_TICKET_TYPES[info.field_name]]
            return decode_ticket_count(value, suffix)
        return value

    @model_validator(mode='after')
    def _check_trip(self) -> 'BookingDraft':
        if self.start_station == self.dest_station:
            raise ValueError('啟程站與到達站不可相同')
        if self.total_tickets() == 0:
            raise ValueError('至少需要購買一張車票')
        return self

    def ticket_count(self, ticket_type: TicketType) -> int:
        return getattr(self, TICKET_COUNT_FIELDS[ticket_type])

    def ticket_counts(self) -> List[Tuple[TicketType, int]]:
        return [(ticket_type, self.ticket_count(ticket_type)) for ticket_type in CANONICAL_TICKET_ORDER]

    def total_tickets(self) -> int:
        return sum(count for _, count in self.ticket_counts())


class BookingFormParams(BaseModel):
    """訂票頁面上與本次連線綁定的參數"""

    session_id: str = ''
    search_by_time_value: str
    time_options: List[str]
    captcha_url: str


class BookingModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_station: int = Field(alias='selectStartStation')
    dest_station: int = Field(alias='selectDestinationStation')
    outbound_date: str = Field(alias='toTimeInputField')
    outbound_time: str = Field(alias='toTimeTable')
    seat_prefer: int = Field(alias='seatCon:seatRadioGroup')
    class_type: int = Field(alias='trainCon:trainRadioGroup')
    adult_ticket_num: str = Field(alias=ticket_amount_field(TicketType.ADULT))
    child_ticket_num: str = Field(alias=ticket_amount_field(TicketType.CHILD))
    disabled_ticket_num: str = Field(alias=ticket_amount_field(TicketType.DISABLED))
    elder_ticket_num: str = Field(alias=ticket_amount_field(TicketType.ELDER))
    college_ticket_num: str = Field(alias=ticket_amount_field(TicketType.COLLEGE))
    search_by: str = Field(alias='bookingMethod')
    types_of_trip: int = Field(alias='tripCon:typesoftrip')
    security_code: str = Field(alias='homeCaptcha:securityCode')
    form_mark: str = Field('', alias='BookingS1Form:hf:0')
    inbound_date: Optional[str] = Field(None, alias='backTimeInputField')
    inbound_time: Optional[str] = Field(None, alias='backTimeTable')
    to_train_id: Optional[int] = Field(None, alias='toTrainIDInputField')
    back_train_id: Optional[int] = Field(None, alias='backTrainIDInputField')

    @classmethod
    def from_draft(
        cls, draft: BookingDraft, params: BookingFormParams, security_code: str
    ) -> 'BookingModel':
        ticket_nums = {
            TICKET_COUNT_FIELDS[ticket_type]: encode_ticket_count(count, TICKET_SUFFIX[ticket_type])
            for ticket_type, count in draft.ticket_counts()
        }
        return cls(
            start_station=encode_ordinal(draft.start_station),
            dest_station=encode_ordinal(draft.dest_station),
            outbound_date=draft.outbound_date,
            outbound_time=draft.outbound_time,
            seat_prefer=encode_ordinal(draft.seat_prefer),
            class_type=encode_ordinal(draft.class_type),
            search_by=params.search_by_time_value,
            types_of_trip=encode_ordinal(TripType.ONE_WAY),
            security_code=security_code,
            **ticket_nums,
        )

    def to_form(self) -> Dict[str, Any]:
        return json.loads(self.model_dump_json(by_alias=True, exclude_none=True))


class Train(BaseModel):
    id: int
    depart: str
    arrive: str
    travel_time: str
    discount_str: str = ''
    form_value: str


class ConfirmTrainModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selected_train: str = Field(alias=TRAIN_GROUP_FIELD)
    form_mark: str = Field('', alias='BookingS2Form:hf:0')

    def to_form(self) -> Dict[str, Any]:
        return json.loads(self.model_dump_json(by_alias=True))


class PassengerIdentityRecord(BaseModel):
    """可重複使用的取票人資料

    passenger_ids 的鍵為依乘客序位產生的欄位名稱，見 field_codec.generate_identity_keys。
    """

    model_config = ConfigDict(frozen=True)

    personal_id: str
    phone_num: str = ''
    passenger_ids: Dict[str, str] = Field(default_factory=dict)


class ConfirmTicketModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    personal_id: str = Field(alias='dummyId')
    phone_num: str = Field(alias='dummyPhone')
    member_radio: str = Field(alias=MEMBER_RADIO_FIELD)
    form_mark: str = Field('', alias='BookingS3FormSP:hf:0')
    id_input_radio: int = Field(0, alias='idInputRadio')
    diff_over: int = Field(1, alias='diffOver')
    email: str = Field('', alias='email')
    agree: str = Field('on', alias='agree')
    go_back_m: str = Field('', alias='isGoBackM')
    back_home: str = Field('', alias='backHome')
    tgo_error: int = Field(1, alias='TgoError')
    passenger_ids: Dict[str, str] = Field(default_factory=dict, exclude=True)

    @classmethod
    def from_record(
        cls,
        record: PassengerIdentityRecord,
        member_radio: str,
        passenger_ids: Optional[Mapping[str, str]] = None,
    ) -> 'ConfirmTicketModel':
        return cls(
            personal_id=record.personal_id,
            phone_num=record.phone_num,
            member_radio=member_radio,
            passenger_ids=dict(record.passenger_ids if passenger_ids is None else passenger_ids),
        )

    def to_form(self) -> Dict[str, Any]:
        params = json.loads(self.model_dump_json(by_alias=True))
        # 優惠票乘客的身分證欄位名稱是動態產生的，直接攤平到表單中
        params.update(self.passenger_ids)
        return params


class Preset(BaseModel):
    booking: BookingDraft
    ticket_confirmation: PassengerIdentityRecord


class ConfirmationSummary(BaseModel):
    ticket_id: str
    total_price: str
    date: str
    from_station: str
    to_station: str
    depart_time: str
    arrive_time: str
    train_code: str
    cabin_label: str
    seat_labels: List[str] = Field(default_factory=list)

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from requests.models import Response

from thsr_booking.configs.user_config import TICKET_TYPE_NAME_MAP
from thsr_booking.configs.web.enums import TicketType
from thsr_booking.configs.web.field_codec import IdentityKey, generate_identity_keys
from thsr_booking.configs.web.param_schema import (
    BookingDraft,
    ConfirmTicketModel,
    PassengerIdentityRecord,
)
from thsr_booking.remote.http_request import HTTPRequest

logger = logging.getLogger(__name__)


def _validate_id_format(id_number: str) -> bool:
    """驗證身分證字號格式

    Args:
        id_number: 身分證字號

    Returns:
        是否為有效格式
    """
    return len(id_number) == 10


def _prompt_passenger_ids(identity_keys: List[IdentityKey], predefined_ids: Dict[str, str]) -> Dict[str, str]:
    """取得每位優惠票乘客的身分證字號

    Args:
        identity_keys: 需要填寫身分證的乘客欄位
        predefined_ids: 預先設定的 {欄位名稱: 身分證字號}

    Returns:
        {欄位名稱: 身分證字號} 的字典
    """
    if not identity_keys:
        return {}

    print(f"\n偵測到 {len(identity_keys)} 位乘客需要填寫身分證")
    print("=" * 50)

    passenger_id_map = {}
    for key in identity_keys:
        ticket_type = TICKET_TYPE_NAME_MAP[key.ticket_type]
        label = f"乘客 {key.position + 1} ({ticket_type}票 #{key.index + 1})"

        if id_number := predefined_ids.get(key.field_name):
            print(f"{label} 身分證字號：{id_number} [使用預設值]")
        else:
            while True:
                id_number = input(f"{label} 身分證字號：").strip()
                if _validate_id_format(id_number):
                    break
                print("  身分證格式錯誤（應為 10 碼），請重新輸入")

        passenger_id_map[key.field_name] = id_number

    print("=" * 50)
    return passenger_id_map


def _check_duplicate_ids(passenger_id_map: Dict[str, str], identity_keys: List[IdentityKey]) -> List[str]:
    """檢查身分證字號是否違反優惠票規則（僅警告，不阻止）

    Returns:
        警告訊息
    """
    id_usage: Dict[str, List[TicketType]] = defaultdict(list)
    for key in identity_keys:
        if id_number := passenger_id_map.get(key.field_name):
            id_usage[id_number].append(key.ticket_type)

    warnings = []
    for id_number, ticket_types in id_usage.items():
        if ticket_types.count(TicketType.ELDER) > 1:
            warnings.append(f"身分證字號 {id_number}：同一身分證號僅能用於 1 位乘客之敬老票")
        if TicketType.ELDER in ticket_types and TicketType.DISABLED in ticket_types:
            warnings.append(f"身分證字號 {id_number}：同一身分證號不能同時用於購買敬老票及愛心票")

    for warning in warnings:
        logger.warning(warning)
    return warnings


class ConfirmTicketFlow:
    def __init__(
        self,
        client: HTTPRequest,
        draft: BookingDraft,
        record: Optional[PassengerIdentityRecord] = None,
    ) -> None:
        self.client = client
        self.draft = draft
        self.record = record

    def prepare_record(self) -> PassengerIdentityRecord:
        identity_keys = generate_identity_keys(self.draft.ticket_counts())
        predefined_ids = dict(self.record.passenger_ids) if self.record else {}
        passenger_ids = _prompt_passenger_ids(identity_keys, predefined_ids)
        _check_duplicate_ids(passenger_ids, identity_keys)

        self.record = PassengerIdentityRecord(
            personal_id=self.set_personal_id(),
            phone_num=self.set_phone_num(),
            passenger_ids=passenger_ids,
        )
        return self.record

    def run(self, member_radio: str) -> Tuple[Response, ConfirmTicketModel]:
        record = self.prepare_record()
        ticket_model = ConfirmTicketModel.from_record(record, member_radio)
        resp = self.client.submit_ticket(ticket_model.to_form())
        return resp, ticket_model

    def set_personal_id(self) -> str:
        if self.record and (personal_id := self.record.personal_id):
            return personal_id

        return input('輸入取票人身分證字號：\n').strip()

    def set_phone_num(self) -> str:
        if self.record:
            return self.record.phone_num

        return input('輸入手機號碼（預設：""）：\n').strip()

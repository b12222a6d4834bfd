"""票數欄位與乘客身分證欄位名稱的編解碼

網站的票數欄位值為「數字 + 票種後綴」（如 "1F"），
而優惠票乘客的身分證欄位名稱則依乘客在所有車票中的序位產生。
"""
import logging
from dataclasses import dataclass
from typing import Collection, List, Mapping, Sequence, Tuple

from thsr_booking.errors import MalformedCount
from .enums import TicketType

logger = logging.getLogger(__name__)


TICKET_SUFFIX: Mapping[TicketType, str] = {
    TicketType.ADULT: 'F',
    TicketType.CHILD: 'H',
    TicketType.DISABLED: 'W',
    TicketType.ELDER: 'E',
    TicketType.COLLEGE: 'P',
}

# 表單中 ticketPanel:rows 的順序，也是乘客序位的計算順序
CANONICAL_TICKET_ORDER: Tuple[TicketType, ...] = (
    TicketType.ADULT,
    TicketType.CHILD,
    TicketType.DISABLED,
    TicketType.ELDER,
    TicketType.COLLEGE,
)

# 每張車票都需要填寫身分證字號的票種
IDENTITY_REQUIRED_TICKET_TYPES: Collection[TicketType] = frozenset({
    TicketType.DISABLED,
    TicketType.ELDER,
})

TICKET_AMOUNT_FIELD_TEMPLATE = 'ticketPanel:rows:{row}:ticketAmount'
PASSENGER_ID_FIELD_TEMPLATE = (
    'TicketPassengerInfoInputPanel:passengerDataView:{position}'
    ':passengerDataView2:passengerDataIdNumber'
)


@dataclass(frozen=True)
class TicketCategory:
    ticket_type: TicketType
    count: int
    requires_identity: bool


@dataclass(frozen=True)
class IdentityKey:
    field_name: str
    ticket_type: TicketType
    index: int  # 同票種中的第幾張
    position: int  # 所有車票中的序位


def encode_ticket_count(count: int, suffix: str) -> str:
    return f'{count}{suffix}'


def decode_ticket_count(value: str, suffix: str) -> int:
    """解析帶票種後綴的票數

    Args:
        value: 欄位值（如 "2E"）
        suffix: 預期的票種後綴（如 "E"）

    Returns:
        int: 票數

    Raises:
        MalformedCount: 後綴不符，或去掉後綴後不是非負整數
    """
    if len(value) < len(suffix) or value[len(value) - len(suffix):] != suffix:
        raise MalformedCount(value, suffix)
    prefix = value[:len(value) - len(suffix)]
    if not (prefix.isascii() and prefix.isdigit()):
        raise MalformedCount(value, suffix)
    return int(prefix)


def ticket_amount_field(ticket_type: TicketType) -> str:
    return TICKET_AMOUNT_FIELD_TEMPLATE.format(row=CANONICAL_TICKET_ORDER.index(ticket_type))


def describe_categories(
    counts: Sequence[Tuple[TicketType, int]],
    requires_identity: Collection[TicketType] = IDENTITY_REQUIRED_TICKET_TYPES,
) -> List[TicketCategory]:
    return [
        TicketCategory(ticket_type, count, ticket_type in requires_identity)
        for ticket_type, count in counts
    ]


def generate_identity_keys(
    counts: Sequence[Tuple[TicketType, int]],
    requires_identity: Collection[TicketType] = IDENTITY_REQUIRED_TICKET_TYPES,
    template: str = PASSENGER_ID_FIELD_TEMPLATE,
) -> List[IdentityKey]:
    """依序產生需要填寫身分證的乘客欄位名稱

    序位以所有票種的票數累計，不只計算需要身分證的票種。
    例如 1 張全票、2 張愛心票、1 張敬老票時，愛心票位於序位 1、2，敬老票位於序位 3。

    Args:
        counts: 依 CANONICAL_TICKET_ORDER 排列的 (票種, 票數)
        requires_identity: 需要身分證的票種
        template: 欄位名稱樣板，以 {position} 代入序位

    Returns:
        List[IdentityKey]: 依序位排列的欄位
    """
    keys: List[IdentityKey] = []
    cursor = 0
    for category in describe_categories(counts, requires_identity):
        if category.count < 0:
            raise MalformedCount(str(category.count), TICKET_SUFFIX[category.ticket_type])
        if category.requires_identity:
            keys.extend(
                IdentityKey(
                    field_name=template.format(position=cursor + idx),
                    ticket_type=category.ticket_type,
                    index=idx,
                    position=cursor + idx,
                )
                for idx in range(category.count)
            )
        cursor += category.count
    logger.debug('identity keys: %s', [key.field_name for key in keys])
    return keys

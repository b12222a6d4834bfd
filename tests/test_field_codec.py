import pytest

from thsr_booking.configs.web.enums import TicketType
from thsr_booking.configs.web.field_codec import (
    CANONICAL_TICKET_ORDER,
    PASSENGER_ID_FIELD_TEMPLATE,
    TICKET_SUFFIX,
    decode_ticket_count,
    encode_ticket_count,
    generate_identity_keys,
    ticket_amount_field,
)
from thsr_booking.errors import MalformedCount


def test_encode_ticket_count() -> None:
    assert encode_ticket_count(1, 'F') == '1F'
    assert encode_ticket_count(0, 'H') == '0H'
    assert encode_ticket_count(10, 'E') == '10E'


@pytest.mark.parametrize('suffix', sorted(TICKET_SUFFIX.values()))
def test_ticket_count_round_trip(suffix: str) -> None:
    for count in (0, 1, 7, 10, 123):
        assert decode_ticket_count(encode_ticket_count(count, suffix), suffix) == count


def test_decode_rejects_suffix_mismatch() -> None:
    with pytest.raises(MalformedCount):
        decode_ticket_count('3X', 'F')


def test_decode_rejects_empty_prefix() -> None:
    with pytest.raises(MalformedCount):
        decode_ticket_count('F', 'F')


def test_decode_rejects_value_shorter_than_suffix() -> None:
    with pytest.raises(MalformedCount):
        decode_ticket_count('', 'F')


@pytest.mark.parametrize('value', ['-1F', 'aF', '1.5F', ' 1F', '²F'])
def test_decode_rejects_non_numeric_prefix(value: str) -> None:
    with pytest.raises(MalformedCount):
        decode_ticket_count(value, 'F')


def test_malformed_count_is_value_error() -> None:
    with pytest.raises(ValueError, match='3X'):
        decode_ticket_count('3X', 'F')


def test_ticket_amount_field_follows_canonical_rows() -> None:
    assert ticket_amount_field(TicketType.ADULT) == 'ticketPanel:rows:0:ticketAmount'
    assert ticket_amount_field(TicketType.COLLEGE) == 'ticketPanel:rows:4:ticketAmount'


def _counts(adult=0, child=0, disabled=0, elder=0, college=0):
    values = dict(zip(CANONICAL_TICKET_ORDER, (adult, child, disabled, elder, college)))
    return [(ticket_type, values[ticket_type]) for ticket_type in CANONICAL_TICKET_ORDER]


def test_identity_positions_skip_non_identity_tickets() -> None:
    keys = generate_identity_keys(_counts(adult=1, disabled=2, elder=1))

    assert [key.position for key in keys] == [1, 2, 3]
    assert [key.ticket_type for key in keys] == [TicketType.DISABLED, TicketType.DISABLED, TicketType.ELDER]
    assert [key.index for key in keys] == [0, 1, 0]
    assert keys[0].field_name == PASSENGER_ID_FIELD_TEMPLATE.format(position=1)
    assert keys[0].field_name == (
        'TicketPassengerInfoInputPanel:passengerDataView:1:passengerDataView2:passengerDataIdNumber'
    )


def test_identity_positions_count_child_tickets_ahead() -> None:
    keys = generate_identity_keys(_counts(adult=2, child=3, elder=2, college=1))

    assert [key.position for key in keys] == [5, 6]


def test_no_identity_keys_without_concession_tickets() -> None:
    assert generate_identity_keys(_counts(adult=3, child=1, college=2)) == []


def test_identity_table_is_configurable() -> None:
    keys = generate_identity_keys(
        _counts(adult=1, child=1, college=2),
        requires_identity={TicketType.COLLEGE},
        template='student:{position}',
    )

    assert [key.field_name for key in keys] == ['student:2', 'student:3']


def test_identity_keys_reject_negative_count() -> None:
    with pytest.raises(MalformedCount):
        generate_identity_keys(_counts(adult=1, elder=-1))

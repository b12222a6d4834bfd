# 各頁面元素的 CSS 選擇器

ERROR_FEEDBACK = 'span.feedbackPanelERROR'

BOOKING_PAGE = {
    'search_by_time': 'input[name="bookingMethod"][data-target="search-by-time"]',
    'time_options': 'select[name="toTimeTable"] > option:not([selected])',
    'security_code_img': '#BookingS1Form_homeCaptcha_passCode',
}

MEMBER_RADIO = (
    'input[name="TicketMemberSystemInputPanel:TakerMemberSystemDataView:memberSystemRadioGroup"][checked]'
)

BOOKING_RESULT = {
    'ticket_id': 'p.pnr-code > span:first-child',
    'total_price': '#setTrainTotalPriceValue',
    'date': 'span.date > span',
    'from_station': 'p.departure-stn > span',
    'to_station': 'p.arrival-stn > span',
    'depart_time': '#setTrainDeparture0',
    'arrive_time': '#setTrainArrival0',
    'train_code': '#setTrainCode0',
    'info_title': 'p.info-title',
    'info_value': 'span',
    'seat_labels': 'div.seat-label > span',
}

# 結果頁中車廂資訊列的標題
CABIN_INFO_TITLE = '車廂'

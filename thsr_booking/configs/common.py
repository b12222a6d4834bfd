BASE_URL = 'https://irs.thsrc.com.tw'
BOOKING_PAGE_URL = f'{BASE_URL}/IMINT/?locale=tw'
SUBMIT_BOOKING_URL = BASE_URL + '/IMINT/;jsessionid={session_id}?wicket:interface=:0:BookingS1Form::IFormSubmitListener'
SUBMIT_TRAIN_URL = f'{BASE_URL}/IMINT/?wicket:interface=:1:BookingS2Form::IFormSubmitListener'
SUBMIT_TICKET_URL = f'{BASE_URL}/IMINT/?wicket:interface=:2:BookingS3Form::IFormSubmitListener'

SESSION_COOKIE_NAME = 'JSESSIONID'

COMMON_HEADERS = {
    'Host': 'irs.thsrc.com.tw',
    'User-Agent': (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/42.0.2311.135 Safari/537.36 Edge/12.246'
    ),
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
    'Accept-Language': 'zh-TW,zh;q=0.8,en-US;q=0.5,en;q=0.3',
    'Accept-Encoding': 'gzip, deflate, br',
}

REQUEST_TIMEOUT = 30  # 秒
MAX_RETRIES = 3

TIMEZONE = 'Asia/Taipei'
DATE_FORMAT = '%Y/%m/%d'

# 開放訂票的天數（含今日）
DAYS_BEFORE_BOOKING_AVAILABLE = 27
MAX_TICKET_NUM = 10

PRESETS_FILE_NAME = 'presets.json'
PRESETS_PATH_ENV = 'THSR_BOOKING_PRESETS'
LOG_LEVEL_ENV = 'THSR_BOOKING_LOG_LEVEL'

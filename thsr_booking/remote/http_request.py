import logging
from typing import Any, Mapping

import requests
from requests.adapters import HTTPAdapter
from requests.cookies import CookieConflictError
from requests.models import Response

from thsr_booking.configs.common import (
    BOOKING_PAGE_URL,
    COMMON_HEADERS,
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    SESSION_COOKIE_NAME,
    SUBMIT_BOOKING_URL,
    SUBMIT_TICKET_URL,
    SUBMIT_TRAIN_URL,
)
from thsr_booking.errors import MalformedDocument

logger = logging.getLogger(__name__)


class HTTPRequest:
    """單一連線的 HTTP 用戶端，保存 cookie 與固定標頭"""

    def __init__(self, max_retries: int = MAX_RETRIES, timeout: float = REQUEST_TIMEOUT) -> None:
        self.sess = requests.Session()
        self.sess.mount('https://', HTTPAdapter(max_retries=max_retries))
        self.sess.headers.update(COMMON_HEADERS)
        self.timeout = timeout

    def request_booking_page(self) -> Response:
        return self._send('GET', BOOKING_PAGE_URL)

    def session_id(self, resp: Response) -> str:
        """從訂票頁面回應（含轉址過程）取得 JSESSIONID"""
        for hop in reversed([*resp.history, resp]):
            try:
                session_id = hop.cookies.get(SESSION_COOKIE_NAME)
            except CookieConflictError as e:
                raise MalformedDocument(f'回應中有多個 {SESSION_COOKIE_NAME}') from e
            if session_id:
                return session_id
        raise MalformedDocument(f'回應中沒有 {SESSION_COOKIE_NAME}')

    def request_security_code_img(self, img_url: str) -> Response:
        return self._send('GET', img_url)

    def submit_booking_form(self, session_id: str, params: Mapping[str, Any]) -> Response:
        url = SUBMIT_BOOKING_URL.format(session_id=session_id)
        return self._send('POST', url, data=params)

    def submit_train(self, params: Mapping[str, Any]) -> Response:
        return self._send('POST', SUBMIT_TRAIN_URL, data=params)

    def submit_ticket(self, params: Mapping[str, Any]) -> Response:
        return self._send('POST', SUBMIT_TICKET_URL, data=params)

    def close(self) -> None:
        self.sess.close()

    def __enter__(self) -> 'HTTPRequest':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _send(self, method: str, url: str, **kwargs: Any) -> Response:
        if 'data' in kwargs:
            logger.debug('%s %s form=%s', method, url, kwargs['data'])
        resp = self.sess.request(method, url, allow_redirects=True, timeout=self.timeout, **kwargs)
        logger.debug('%s %s -> %s', method, url, resp.status_code)
        resp.raise_for_status()
        return resp

"""訂票流程的錯誤類型"""
from typing import Iterable, List


class BookingError(Exception):
    """所有訂票流程錯誤的基底類別"""


class MalformedCount(BookingError, ValueError):
    """票數欄位缺少預期的票種後綴或數字前綴"""

    def __init__(self, value: str, suffix: str) -> None:
        self.value = value
        self.suffix = suffix
        super().__init__(f'無效的票數欄位: {value!r}（預期後綴 {suffix!r}）')


class MalformedDocument(BookingError):
    """回傳頁面缺少預期的元素，代表網頁結構已變更"""


class ValidationRejected(BookingError):
    """送出表單後，網站回傳了錯誤訊息"""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__('; '.join(self.errors))


class PresetNotFound(BookingError, IndexError):
    def __init__(self, number: int, total: int) -> None:
        self.number = number
        self.total = total
        super().__init__(f'找不到第 {number} 組預設（共 {total} 組）')


class WorkflowStateError(BookingError):
    """流程步驟未依序執行"""

"""用戶輸入與設定的轉換工具"""
import os
import re
from datetime import date, datetime
from typing import Optional, Sequence, Union
from zoneinfo import ZoneInfo

from .common import DATE_FORMAT, PRESETS_FILE_NAME, PRESETS_PATH_ENV, TIMEZONE
from .web.enums import CabinClass, SeatPreference, Station, TicketType
from .web.ordinal_codec import decode_ordinal


# 車站中文名稱對照表（用於顯示）
STATION_CHINESE_NAME = {
    Station.Nangang: "南港",
    Station.Taipei: "台北",
    Station.Banqiao: "板橋",
    Station.Taoyuan: "桃園",
    Station.Hsinchu: "新竹",
    Station.Miaoli: "苗栗",
    Station.Taichung: "台中",
    Station.Changhua: "彰化",
    Station.Yunlin: "雲林",
    Station.Chiayi: "嘉義",
    Station.Tainan: "台南",
    Station.Zuoying: "左營",
}

# 票種中文名稱對照表
TICKET_TYPE_NAME_MAP = {
    TicketType.ADULT: "成人",
    TicketType.CHILD: "孩童",
    TicketType.DISABLED: "愛心",
    TicketType.ELDER: "敬老",
    TicketType.COLLEGE: "大學生",
}

CABIN_CLASS_NAME_MAP = {
    CabinClass.STANDARD: "標準車廂",
    CabinClass.BUSINESS: "商務車廂",
}

SEAT_PREFERENCE_NAME_MAP = {
    SeatPreference.NO_PREFERENCE: "無偏好",
    SeatPreference.WINDOW: "靠窗優先",
    SeatPreference.AISLE: "走道優先",
}


def get_presets_path() -> str:
    """取得預設檔路徑，可由環境變數 THSR_BOOKING_PRESETS 覆寫"""
    return os.environ.get(PRESETS_PATH_ENV) or os.path.join(os.getcwd(), PRESETS_FILE_NAME)


def today() -> date:
    """台灣時間的今日日期"""
    return datetime.now(ZoneInfo(TIMEZONE)).date()


def parse_station(value: Union[str, int, Station]) -> Station:
    """將車站名稱或代碼轉換為 Station

    Args:
        value: 車站中文名稱（如 "台北"）、英文名稱（如 "Taipei"）或代碼（1-12）

    Returns:
        Station: 對應的車站

    Raises:
        ValueError: 若車站名稱無效
    """
    if isinstance(value, Station):
        return value

    name = str(value).strip()
    for station, chinese_name in STATION_CHINESE_NAME.items():
        if name == chinese_name:
            return station

    try:
        return Station[name]
    except KeyError:
        pass

    if name.isdigit():
        return decode_ordinal(Station, int(name))

    valid_names = ", ".join(STATION_CHINESE_NAME.values())
    raise ValueError(f"無效的車站名稱: {value}。有效選項: {valid_names}")




def normalize_date(value: Union[str, date]) -> str:
    """將日期轉為 YYYY/MM/DD，接受 YYYY/MM/DD 或 YYYY-MM-DD"""
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    text = value.strip().replace("-", "/")
    try:
        return datetime.strptime(text, DATE_FORMAT).strftime(DATE_FORMAT)
    except ValueError:
        raise ValueError(f"無效的日期格式: {value}，請使用 YYYY/MM/DD 格式") from None


def time_to_system_format(time_str: str, available: Optional[Sequence[str]] = None) -> str:
    """將 24 小時制時間轉換為系統時間格式

    Args:
        time_str: 24 小時制時間（如 "06:00", "13:30"）
        available: 訂票頁面提供的時段；若提供則檢查結果是否在其中

    Returns:
        str: 系統時間格式（如 "600A", "130P"）

    Raises:
        ValueError: 若時間格式無效或不在可用時間表中
    """
    parts = time_str.split(":")
    if len(parts) != 2:
        raise ValueError(f"無效的時間格式: {time_str}，請使用 HH:MM 格式")

    try:
        hour = int(parts[0])
        minute = int(parts[1])
    except ValueError:
        raise ValueError(f"無效的時間格式: {time_str}") from None

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"無效的時間: {time_str}")

    if hour == 0:
        # 00:30 -> 1230A
        system_time = f"12{minute:02d}A"
    elif hour < 12:
        system_time = f"{hour}{minute:02d}A"
    elif hour == 12:
        system_time = "1200N" if minute == 0 else f"12{minute:02d}P"
    else:
        system_time = f"{hour - 12}{minute:02d}P"

    if available is not None and system_time not in available:
        available_times = ", ".join(system_format_to_time(t) for t in available)
        raise ValueError(f"時間 {time_str} 不在可用時間表中。可用時間: {available_times}")

    return system_time


def system_format_to_time(system_time: str) -> str:
    """將系統時間格式轉換為 24 小時制

    Args:
        system_time: 系統時間格式（如 "600A", "130P"）

    Returns:
        str: 24 小時制時間（如 "06:00", "13:30"）
    """
    suffix = system_time[-1]
    time_part = system_time[:-1]

    if len(time_part) == 3:
        hour = int(time_part[0])
        minute = int(time_part[1:])
    else:
        hour = int(time_part[:2])
        minute = int(time_part[2:])

    if suffix == "A":
        if hour == 12:
            hour = 0
    elif suffix == "N":
        hour = 12
    elif suffix == "P":
        if hour != 12:
            hour += 12

    return f"{hour:02d}:{minute:02d}"


_TIME_SLOT_PATTERN = re.compile(r"(1[0-2]|[1-9])[0-5][0-9][ANP]")


def is_time_slot(token: str) -> bool:
    """是否為網站的時段代碼（如 "930A", "1200N", "1130P"）"""
    return bool(_TIME_SLOT_PATTERN.fullmatch(token))

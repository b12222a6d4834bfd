"""驗證碼處理模組：顯示圖片並由使用者輸入"""
import io

from PIL import Image


def input_captcha(img_resp: bytes) -> str:
    """顯示驗證碼圖片並請使用者輸入

    Args:
        img_resp: 驗證碼圖片的 bytes 資料

    Returns:
        驗證碼字串
    """
    image = Image.open(io.BytesIO(img_resp))
    image.show()
    return input('輸入驗證碼：').strip()

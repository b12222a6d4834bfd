import logging
from typing import Optional

from thsr_booking.configs.web.param_schema import Preset
from thsr_booking.model.preset_store import PresetStore
from thsr_booking.view.web.show_presets import ShowPresets

logger = logging.getLogger(__name__)


class PresetFlow:
    def __init__(self, store: Optional[PresetStore] = None, preset_number: Optional[int] = None) -> None:
        self.store = store or PresetStore()
        self.preset_number = preset_number
        self.show_presets = ShowPresets()

    def run(self) -> Optional[Preset]:
        """取得本次要使用的預設，沒有選擇時回傳 None（改為手動輸入）"""
        if self.preset_number is not None:
            preset = self.store.get(self.preset_number)
            print('自動選擇預設：')
            self.show_presets.show_one(self.preset_number, preset)
            return preset

        presets = self.store.load()
        if not presets:
            return None

        self.show_presets.show(presets)
        selected = input('選擇要載入的預設（預設：手動輸入）：').strip()
        if not selected:
            return None
        return self.store.get(int(selected))

    def offer_save(self, preset: Preset) -> Optional[int]:
        if input('是否將本次訂票資料存為預設？(y/N)：').strip().lower() != 'y':
            return None
        number = self.store.append(preset)
        print(f'已存為第 {number} 組預設（{self.store.path}）')
        return number

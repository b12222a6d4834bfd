"""預設檔（presets.json）讀寫模組

檔案內容為預設的串列，每組包含 booking 與 ticket_confirmation，
欄位使用易讀的名稱而非網站表單欄位名稱。
"""
import json
import logging
import os
from typing import List, Optional

from thsr_booking.configs.user_config import get_presets_path
from thsr_booking.configs.web.param_schema import Preset
from thsr_booking.errors import PresetNotFound

logger = logging.getLogger(__name__)


class PresetStore:
    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path or get_presets_path()

    def load(self) -> List[Preset]:
        """讀取所有預設

        Returns:
            List[Preset]: 預設串列，若檔案不存在則回傳空串列
        """
        if not os.path.exists(self.path):
            logger.info('presets not found in %s, skip', self.path)
            return []

        with open(self.path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
        return [Preset.model_validate(item) for item in raw]

    def get(self, number: int) -> Preset:
        """以 1 起算的序號取得預設

        Raises:
            PresetNotFound: 序號超出範圍
        """
        presets = self.load()
        if not 1 <= number <= len(presets):
            raise PresetNotFound(number, len(presets))
        return presets[number - 1]

    def save(self, presets: List[Preset]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(
                [preset.model_dump(mode='json') for preset in presets],
                f,
                ensure_ascii=False,
                indent=2,
            )

    def append(self, preset: Preset) -> int:
        """新增一組預設，回傳其序號"""
        presets = self.load()
        presets.append(preset)
        self.save(presets)
        logger.info('preset #%d saved to %s', len(presets), self.path)
        return len(presets)

# services/keyboard_layout.py
from typing import Dict, Optional

from app.errors import ConfigError

_QWERTY = ("qwertyuiop[]", "asdfghjkl;'", "zxcvbnm,./")

LAYOUTS: Dict[str, tuple] = {
    "dvorak": ("',.pyfgcrl/=", "aoeuidhtns-", ";qjkxbmwvz"),
    "colemak": ("qwfpgjluy;[]", "arstdhneio'", "zxcvbkm,./"),
}


def _build_table(rows) -> Dict[str, str]:
    table = {}
    for src_row, dst_row in zip(_QWERTY, rows):
        for src, dst in zip(src_row, dst_row):
            if src != dst:
                table[src] = dst
    return table


class KbEmulator:
    """Types a layout on a QWERTY keyboard: same physical key, other character."""

    def __init__(self, layout: str):
        if layout not in LAYOUTS:
            raise ConfigError(f"unknown keyboard layout: {layout!r}")
        self.layout = layout
        self._table = _build_table(LAYOUTS[layout])

    def translate(self, ch: str) -> Optional[str]:
        if ch.isupper():
            out = self._table.get(ch.lower())
            # shifted punctuation keys are left alone
            return out.upper() if out and out.isalpha() else None
        return self._table.get(ch)

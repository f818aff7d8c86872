from __future__ import annotations

from typing import Final

ROOT_CURRENCY_TICKERS: Final[dict[str, str]] = {
    "verus-testnet": "vrsctest",
    "verus": "vrsc",
    "chips": "chips",
    "vdex": "vdex",
    "varrr": "varrr",
}

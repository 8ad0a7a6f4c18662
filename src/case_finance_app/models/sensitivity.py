from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .assumptions import SensitivityKey


class TornadoBar(BaseModel):
    assumption_key: SensitivityKey
    label: str
    base_npv: float
    low_npv: float
    high_npv: float
    low_delta: float
    high_delta: float
    spread: float


class SensitivityResult(BaseModel):
    base_npv: float
    variation_pct: float
    bars: List[TornadoBar]

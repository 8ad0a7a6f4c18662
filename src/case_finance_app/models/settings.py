from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, confloat, conint


ENV_PREFIX = "CASE_FINANCE_"


class EngineSettings(BaseModel):
    irr_guess: confloat(gt=-1) = Field(0.1, description="Starting rate for the IRR solver, as decimal")
    irr_tolerance: confloat(gt=0) = 1e-7
    irr_max_iterations: conint(ge=1) = 100
    sensitivity_variation_pct: confloat(gt=0, lt=100) = Field(
        20.0, description="Symmetric +/- perturbation applied to each tornado input, in percent"
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        """Build settings from ``CASE_FINANCE_*`` variables, falling back to defaults.

        ``CASE_FINANCE_IRR_GUESS=0.2`` overrides ``irr_guess`` and so on. Values are
        validated by the model, so a malformed variable raises ``ValidationError``.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        return cls(**values)

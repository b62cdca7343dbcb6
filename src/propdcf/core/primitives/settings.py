# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

from pydantic import Field, model_validator

from .enums import RenewalModeEnum
from .model import Model
from .types import FloatBetween0And1, PositiveInt


class RenewalSettings(Model):
    """
    Settings controlling how renewal probabilities resolve at lease expiry.

    The default threshold policy keeps the engine a pure function of its
    inputs. Stochastic mode is opt-in and always seeded.
    """

    mode: RenewalModeEnum = Field(
        default=RenewalModeEnum.THRESHOLD,
        description="Renewal resolution policy.",
    )
    threshold: FloatBetween0And1 = Field(
        default=0.5,
        description="Renew iff renewal probability >= threshold (threshold mode only).",
    )
    seed: Optional[PositiveInt] = Field(
        default=None,
        description="Seed for the stochastic policy. Required when mode is stochastic.",
    )

    @model_validator(mode="after")
    def check_seed_for_stochastic(self) -> "RenewalSettings":
        if self.mode == RenewalModeEnum.STOCHASTIC and self.seed is None:
            raise ValueError("seed must be set when renewal mode is stochastic")
        return self


class IRRSettings(Model):
    """Newton-Raphson solver settings for the internal rate of return."""

    initial_guess: float = Field(default=0.10, gt=-1.0)
    tolerance: float = Field(default=1e-7, gt=0)
    max_iterations: PositiveInt = Field(default=100)


class AnalysisSettings(Model):
    """Engine settings

    Groups behaviour switches that are not property assumptions.
    """

    renewal: RenewalSettings = Field(default_factory=RenewalSettings)
    irr: IRRSettings = Field(default_factory=IRRSettings)

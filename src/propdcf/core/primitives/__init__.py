# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propdcf Core Primitives

Base model, constrained types, enums, settings and calendar math used by
every other module.
"""

from .calendar import (
    ProjectionYear,
    add_years,
    anniversary_before,
    expired_within_prior_year,
    full_years_elapsed,
    projection_year,
)
from .enums import CashFlowLineKey, ExpenseCategoryEnum, RenewalModeEnum
from .model import Model
from .settings import AnalysisSettings, IRRSettings, RenewalSettings
from .types import (
    FloatBetween0And1,
    PositiveFloat,
    PositiveInt,
    StrictlyPositiveFloat,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "AnalysisSettings",
    "IRRSettings",
    "RenewalSettings",
    # Enums
    "CashFlowLineKey",
    "ExpenseCategoryEnum",
    "RenewalModeEnum",
    # Calendar
    "ProjectionYear",
    "add_years",
    "anniversary_before",
    "expired_within_prior_year",
    "full_years_elapsed",
    "projection_year",
    # Types
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
    "StrictlyPositiveFloat",
]

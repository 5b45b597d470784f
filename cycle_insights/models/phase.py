"""
Phase model definitions for cycle phase inference.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CyclePhase(str, Enum):
    """
    Named stages of the menstrual cycle.

    ``UNKNOWN`` is reported when there is no open cycle to reason about.
    """
    MENSTRUAL = "Menstrual"
    FOLLICULAR = "Follicular"
    OVULATION = "Ovulation"
    LUTEAL = "Luteal"
    UNKNOWN = "Unknown"


class PhaseBoundaries(BaseModel):
    """Last cycle day (inclusive) of each phase for a given cycle length."""
    cycle_length: int
    ovulation_day: int
    follicular_end: int
    ovulation_end: int


class PhaseResult(BaseModel):
    """
    Current position within the cycle.
    """
    model_config = ConfigDict(populate_by_name=True)

    cycle_day: Optional[int] = Field(None, ge=1, alias="cycleDay")
    cycle_phase: CyclePhase = Field(CyclePhase.UNKNOWN, alias="cyclePhase")

    @property
    def is_known(self) -> bool:
        return self.cycle_phase != CyclePhase.UNKNOWN


class PhaseInfo(BaseModel):
    """Display copy for a phase."""
    phase: CyclePhase
    title: str
    description: str

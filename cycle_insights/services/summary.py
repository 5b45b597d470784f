"""
Combined cycle summary for dashboards and coaching prompts.

The predictor's average cycle length scales the phase boundaries; without
enough history the phase falls back to the default 28-day layout.
"""
from datetime import date
from typing import Sequence

from aws_lambda_powertools import Logger

from cycle_insights.models.cycle import CycleRecord
from cycle_insights.models.phase import CyclePhase
from cycle_insights.models.prediction import CycleSummary
from cycle_insights.services.cycle import calculate_cycle_averages, predict
from cycle_insights.services.phase import compute_phase

logger = Logger()

def build_cycle_summary(cycle_history: Sequence[CycleRecord], reference_date: date) -> CycleSummary:
    """
    Compute phase, prediction and averages for one reference date.

    Args:
        cycle_history: Cycle records ordered most-recent-first
        reference_date: Date to evaluate

    Returns:
        CycleSummary for the reference date
    """
    prediction = predict(cycle_history)
    latest_cycle = cycle_history[0] if cycle_history else None
    phase = compute_phase(latest_cycle, reference_date, prediction.average_cycle_length)

    logger.debug("Built cycle summary", extra={
        "cycles": len(cycle_history),
        "cycle_day": phase.cycle_day,
        "cycle_phase": phase.cycle_phase.value,
        "has_prediction": prediction.has_prediction
    })

    return CycleSummary(
        reference_date=reference_date,
        phase=phase,
        prediction=prediction,
        averages=calculate_cycle_averages(cycle_history)
    )

def format_cycle_context(summary: CycleSummary) -> str:
    """
    Render a one-line description of the cycle for prompt context.

    Example:
        >>> format_cycle_context(summary)
        'Cycle day 12 (Ovulation phase); next period expected 2024-01-29'
    """
    if summary.phase.cycle_phase == CyclePhase.UNKNOWN:
        parts = ["Cycle phase unknown"]
    else:
        parts = [f"Cycle day {summary.phase.cycle_day} ({summary.phase.cycle_phase.value} phase)"]

    if summary.prediction.next_period_start is not None:
        parts.append(f"next period expected {summary.prediction.next_period_start.isoformat()}")

    return "; ".join(parts)

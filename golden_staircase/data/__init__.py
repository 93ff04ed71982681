"""Staircase instance generation."""

from golden_staircase.data.gen_steps import StepConfig, generate_steps

__all__ = ["StepConfig", "generate_steps"]

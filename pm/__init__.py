"""
Outputs layer — percentile aggregation, scenario comparison, and sustainability flags.
"""

from .aggregator import aggregate_percentiles, percentile_bands_frame, summarize_depletion
from .comparison import balance_comparison_frame, compare_scenarios
from .decisions import generate_sustainability_report

__all__ = [
    "aggregate_percentiles",
    "percentile_bands_frame",
    "summarize_depletion",
    "balance_comparison_frame",
    "compare_scenarios",
    "generate_sustainability_report",
]

"""Creative report synthesis."""

from .metrics import draw_metric_value, generate_metrics
from .synthesizer import ReportSynthesizer, synthesize_report

__all__ = [
    'ReportSynthesizer',
    'draw_metric_value',
    'generate_metrics',
    'synthesize_report',
]

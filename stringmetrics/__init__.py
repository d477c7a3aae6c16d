"""Métriques de similarité entre chaînes : Levenshtein, Damerau-Levenshtein, Dice."""
from stringmetrics.logger import configure_logging
from stringmetrics.models import Distance, MetricKind, Ordering, RankedEntry
from stringmetrics.scoring.metrics import (
    SortOptions,
    StringMetric,
    damerau_levenshtein_metric as damerau_levenshtein,
    dice_metric as dice,
    get_metric,
    levenshtein_metric as levenshtein,
    sort_with,
)

__all__ = [
    "Distance",
    "MetricKind",
    "Ordering",
    "RankedEntry",
    "SortOptions",
    "StringMetric",
    "configure_logging",
    "damerau_levenshtein",
    "dice",
    "get_metric",
    "levenshtein",
    "sort_with",
]

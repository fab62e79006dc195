"""
Trend and statistics service.

Works on a slice of calculation records ordered newest first. Records only
need the metric attribute (``bmi`` or ``tdee``), ``created_at`` and the
attribute named by ``group_by``.
"""

from collections import Counter, OrderedDict
from typing import Any, Dict, List, Optional, Sequence

from healthcalc.config import settings
from healthcalc.domain.enums import TrendDirection, TrendSignificance

# Per-metric absolute change thresholds in the metric's own unit.
# "stable" is the band a change must exceed to count as a direction;
# the significance ladder is ordered largest first.
TREND_THRESHOLDS = {
    "bmi": {
        "stable": 0.5,
        "ladder": (
            (2.0, TrendSignificance.SIGNIFICANT),
            (1.0, TrendSignificance.MODERATE),
            (0.5, TrendSignificance.SLIGHT),
        ),
    },
    "tdee": {
        "stable": 50,
        "ladder": (
            (200, TrendSignificance.SIGNIFICANT),
            (100, TrendSignificance.MODERATE),
            (50, TrendSignificance.SLIGHT),
        ),
    },
}


def clamp_history_limit(limit: Optional[int]) -> int:
    """Default to the configured slice size and never exceed the hard cap."""
    if limit is None or limit < 1:
        return settings.history_default_limit
    return min(limit, settings.history_max_limit)


def _significance(change: float, ladder) -> TrendSignificance:
    magnitude = abs(change)
    for threshold, significance in ladder:
        if magnitude >= threshold:
            return significance
    return TrendSignificance.MINIMAL


class TrendAnalyzer:
    """Trend direction and aggregate statistics over record history."""

    @staticmethod
    def analyze_trend(history: Sequence[Any], metric: str = "bmi") -> Dict[str, Any]:
        """
        Compare the two most recent records.

        Args:
            history: Records ordered newest first
            metric: Attribute to compare ("bmi" or "tdee")

        Returns:
            Dict with direction, change, change_percent, significance,
            latest, previous and metric. Numeric fields are None when fewer
            than two records exist.
        """
        if len(history) < 2:
            return {
                "metric": metric,
                "direction": TrendDirection.INSUFFICIENT_DATA.value,
                "change": None,
                "change_percent": None,
                "significance": None,
                "latest": getattr(history[0], metric) if history else None,
                "previous": None,
            }

        latest = getattr(history[0], metric)
        previous = getattr(history[1], metric)
        change = latest - previous
        thresholds = TREND_THRESHOLDS[metric]
        stable = thresholds["stable"]

        if change > stable:
            direction = TrendDirection.INCREASING
        elif change < -stable:
            direction = TrendDirection.DECREASING
        else:
            direction = TrendDirection.STABLE

        change_percent = (change / previous * 100) if previous else 0.0

        return {
            "metric": metric,
            "direction": direction.value,
            "change": round(change, 2),
            "change_percent": round(change_percent, 2),
            "significance": _significance(change, thresholds["ladder"]).value,
            "latest": latest,
            "previous": previous,
        }

    @staticmethod
    def compute_statistics(
        history: Sequence[Any], metric: str = "bmi", group_by: str = "category_code"
    ) -> Dict[str, Any]:
        """
        Aggregate a history slice.

        ``distribution`` counts records per ``group_by`` value. For TDEE
        history (grouped by activity level) the most frequent level is also
        reported; ties go to the level seen most recently.
        """
        values = [getattr(record, metric) for record in history]
        distribution = Counter(str(getattr(record, group_by)) for record in history)

        stats: Dict[str, Any] = {
            "metric": metric,
            "total_records": len(history),
            "average": round(sum(values) / len(values), 2) if values else None,
            "min": min(values) if values else None,
            "max": max(values) if values else None,
            "latest": values[0] if values else None,
            "distribution": dict(distribution),
            "first_recorded_at": history[-1].created_at if history else None,
            "last_recorded_at": history[0].created_at if history else None,
            "monthly_progress": TrendAnalyzer.monthly_progress(history, metric),
        }

        if group_by == "activity_level":
            stats["most_used_activity_level"] = (
                distribution.most_common(1)[0][0] if distribution else None
            )

        return stats

    @staticmethod
    def monthly_progress(history: Sequence[Any], metric: str) -> List[Dict[str, Any]]:
        """Per-month average and record count, oldest month first."""
        buckets: "OrderedDict[str, List[float]]" = OrderedDict()
        for record in reversed(history):
            month = record.created_at.strftime("%Y-%m")
            buckets.setdefault(month, []).append(getattr(record, metric))

        return [
            {
                "month": month,
                "average": round(sum(values) / len(values), 2),
                "record_count": len(values),
            }
            for month, values in buckets.items()
        ]

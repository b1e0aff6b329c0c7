"""Metric Registry — performance metrics with a target and a threshold band.

Invariants:
    - register_metric rejects empty bands (threshold_min >= threshold_max) before writing
    - New metrics start at current_value=0, last_measured = call's block height
    - update_metric never re-checks the band; out-of-band values are legal
    - is_metric_optimal is inclusive on both bounds, False for unknown ids
"""

from dataclasses import replace

from infraopt.core.domain_types import CallContext, MetricId, OptimizationType
from infraopt.core.enforce_access import AuthorizationGuard
from infraopt.core.enforce_thresholds import check_threshold_band, is_within_band
from infraopt.core.errors import (
    ERR_OWNER_ONLY_PERFORMANCE, ErrorContext, MetricNotFoundError,
)
from infraopt.core.records import PerformanceMetric, Registration


class MetricRegistry:
    """Keyed store of PerformanceMetric."""

    def __init__(
        self, guard: AuthorizationGuard,
        metrics: dict[MetricId, PerformanceMetric] | None = None,
    ):
        self._guard = guard
        self._metrics: dict[MetricId, PerformanceMetric] = dict(metrics or {})

    def register_metric(
        self, ctx: CallContext, metric_id: MetricId, metric_name: str,
        target_value: int, threshold_min: int, threshold_max: int,
        optimization_type: OptimizationType,
    ) -> Registration[PerformanceMetric]:
        error = (
            self._guard.check(ctx, "register_metric", ERR_OWNER_ONLY_PERFORMANCE)
            or check_threshold_band(ctx, metric_id, threshold_min, threshold_max)
        )
        if error:
            raise error
        metric = PerformanceMetric(
            metric_name=metric_name,
            current_value=0,
            target_value=target_value,
            threshold_min=threshold_min,
            threshold_max=threshold_max,
            optimization_type=OptimizationType(optimization_type),
            last_measured=ctx.block_height,
        )
        replaced = metric_id in self._metrics
        self._metrics[metric_id] = metric
        return Registration(record=metric, replaced=replaced)

    def update_metric(
        self, ctx: CallContext, metric_id: MetricId, new_value: int,
    ) -> PerformanceMetric:
        denied = self._guard.check(ctx, "update_metric", ERR_OWNER_ONLY_PERFORMANCE)
        if denied:
            raise denied
        current = self._metrics.get(metric_id)
        if current is None:
            raise MetricNotFoundError(
                metric_id,
                ErrorContext(
                    caller=ctx.caller, operation="update_metric",
                    entity_id=metric_id, block_height=ctx.block_height,
                ),
            )
        updated = replace(
            current, current_value=new_value, last_measured=ctx.block_height,
        )
        self._metrics[metric_id] = updated
        return updated

    def is_metric_optimal(self, metric_id: str) -> bool:
        metric = self.get(metric_id)
        if metric is None:
            return False
        return is_within_band(
            metric.current_value, metric.threshold_min, metric.threshold_max,
        )

    def get(self, metric_id: str) -> PerformanceMetric | None:
        return self._metrics.get(MetricId(metric_id))

    def items(self) -> list[tuple[MetricId, PerformanceMetric]]:
        """All metrics, sorted by id."""
        return sorted(self._metrics.items())

    def __contains__(self, metric_id: object) -> bool:
        return metric_id in self._metrics

    def __len__(self) -> int:
        return len(self._metrics)

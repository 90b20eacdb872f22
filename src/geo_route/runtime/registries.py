# runtime/registries.py
from collections.abc import Callable

from geo_route.app.protocols import DistanceMetric
from geo_route.config.models import HaversineMetricModel, MetricUnion, PlanarMetricModel
from geo_route.domain.routing.routing_metrics import PLANAR, HaversineMetric

MetricFactory = Callable[[MetricUnion], DistanceMetric]

_metric_registry: dict[str, MetricFactory] = {}


# ------------------- Metric registry ---------------------------


def register_metric(kind: str):
    def deco(fn: MetricFactory):
        _metric_registry[kind] = fn
        return fn

    return deco


def make_metric(cfg: MetricUnion) -> DistanceMetric:
    try:
        factory = _metric_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown metric kind {cfg.kind!r}")
    return factory(cfg)


@register_metric("planar")
def _make_planar(cfg: PlanarMetricModel):
    return PLANAR


@register_metric("haversine")
def _make_haversine(cfg: HaversineMetricModel):
    return HaversineMetric(cfg.unit)

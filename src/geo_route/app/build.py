# geo_route/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from geo_route.app.protocols import NoopHooks, SearchHooks
from geo_route.config.models import NavigatorModel
from geo_route.domain.entities.graph import Graph
from geo_route.domain.routing.routing_core import Navigator
from geo_route.io.graph_file import load_graph
from geo_route.io.route_logging import RouteLogging  # JSON logs
from geo_route.runtime.registries import make_metric


@dataclass
class App:
    config: NavigatorModel
    graph: Graph
    navigator: Navigator
    hooks: SearchHooks


def build(cfg: NavigatorModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, NavigatorModel) else NavigatorModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        RouteLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Metric & graph (FileNotFoundError / MalformedGraphError propagate)
    metric = make_metric(model.metric)
    graph = load_graph(model.graph.file, metric=metric)
    hooks.graph_loaded(source=model.graph.file, vertices=graph.vertex_count, edges=graph.edge_count)

    # 3) Routing façade
    navigator = Navigator(graph, hooks=hooks)

    return App(model, graph, navigator, hooks)

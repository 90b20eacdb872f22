# io/route_logging.py
import json
import logging
import sys

from geo_route.app.protocols import NoopHooks


def _default_json_logger(name="geo_route", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class RouteLogging(NoopHooks):
    """
    One place to shape and emit structured logs for graph loading and route searches.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)
        self.searches = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def graph_loaded(self, *, source, vertices, edges):
        self._emit("INFO", "graph_loaded", source=source, vertices=vertices, edges=edges)

    def search_start(self, *, start, end, vertices):
        if self.debug:
            self._emit("DEBUG", "search_start", start=start, end=end, vertices=vertices)

    def search_end(self, *, start, end, settled, relaxed, hops, length, ms):
        self.searches += 1
        self._emit(
            "INFO",
            "route_found",
            start=start,
            end=end,
            settled=settled,
            relaxed=relaxed,
            hops=hops,
            length=length,
            ms=round(ms, 3),
        )

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "route_error", reason=reason, **extra)

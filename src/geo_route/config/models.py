import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- METRICS ---------------------


class PlanarMetricModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["planar"] = "planar"


class HaversineMetricModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["haversine"] = "haversine"
    unit: Literal["mi", "km"] = "mi"


MetricUnion = Annotated[
    PlanarMetricModel | HaversineMetricModel,
    Field(discriminator="kind"),
]


# ----------------- GRAPH SOURCE ---------------------


class GraphFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file: str

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


# ------------------------------------------------------------------


class NavigatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "geo_route"
    run_id: str = "local"
    graph: GraphFileModel
    metric: MetricUnion = Field(default_factory=HaversineMetricModel)
    log: LogModel = LogModel()

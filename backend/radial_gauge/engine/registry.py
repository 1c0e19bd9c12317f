"""Stage registry: each step of the gauge layout is a decorated function.

Usage:
    @stage(id="G3.02", layer=Layer.GEOMETRY, dependencies=["G3.01"])
    def fill(ctx: GaugeContext) -> None:
        ctx.add(*build_fill(ctx))

Stages run in dependency order. Geometry and label stages append primitives,
so that order is also the paint order; ties are broken by (layer, id) to keep
it stable across runs.
"""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from radial_gauge.engine.context import GaugeContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    VALIDATION = 0
    NORMALIZATION = 1
    DOMAIN = 2
    GEOMETRY = 3
    LABELS = 4
    FITTING = 5


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["GaugeContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def sort_key(self) -> tuple[int, str]:
        return (int(self.layer), self.id)


class StageRegistry:
    """All known stages plus their resolved run order."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}
        self._order: list[StageSpec] | None = None

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        self._order = None
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: s.sort_key)

    def _check_dependencies(self) -> None:
        for spec in self._stages.values():
            for dep in spec.dependencies:
                upstream = self._stages.get(dep)
                if upstream is None:
                    raise ValueError(f"Stage {spec.id} depends on unknown stage {dep}")
                # A stage may only read what its own or an earlier layer produced
                if upstream.layer > spec.layer:
                    raise ValueError(
                        f"Stage {spec.id} ({spec.layer.name}) depends on later-layer "
                        f"stage {dep} ({upstream.layer.name})"
                    )

    def resolve_order(self) -> list[StageSpec]:
        """Dependency order of every stage, computed once per registration change."""
        if self._order is not None:
            return list(self._order)

        self._check_dependencies()
        waiting = {sid: len(spec.dependencies) for sid, spec in self._stages.items()}
        dependents: dict[str, list[str]] = {sid: [] for sid in self._stages}
        for spec in self._stages.values():
            for dep in spec.dependencies:
                dependents[dep].append(spec.id)

        ready = [spec.sort_key for spec in self._stages.values() if not spec.dependencies]
        heapq.heapify(ready)
        ordered: list[StageSpec] = []
        while ready:
            _, sid = heapq.heappop(ready)
            ordered.append(self._stages[sid])
            for child in dependents[sid]:
                waiting[child] -= 1
                if waiting[child] == 0:
                    heapq.heappush(ready, self._stages[child].sort_key)

        if len(ordered) != len(self._stages):
            stuck = sorted(sid for sid, n in waiting.items() if n > 0)
            raise ValueError(f"Circular dependency detected among: {stuck}")

        self._order = ordered
        return list(ordered)

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["GaugeContext"], None]):
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator

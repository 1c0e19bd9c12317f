"""Tests for the stage registry."""

import pytest

from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.registry import Layer, StageRegistry, StageSpec, get_registry


def _noop(ctx: GaugeContext) -> None:
    pass


def _spec(sid: str, layer: Layer, *deps: str) -> StageSpec:
    return StageSpec(id=sid, layer=layer, fn=_noop, dependencies=list(deps))


def test_register_and_get():
    reg = StageRegistry()
    spec = _spec("G0.01", Layer.VALIDATION)
    reg.register(spec)
    assert reg.get("G0.01") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = StageRegistry()
    reg.register(_spec("G0.01", Layer.VALIDATION))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(_spec("G0.01", Layer.VALIDATION))


def test_dependencies_run_first():
    reg = StageRegistry()
    reg.register(_spec("G3.02", Layer.GEOMETRY, "G3.01"))
    reg.register(_spec("G3.01", Layer.GEOMETRY, "G2.02"))
    reg.register(_spec("G2.02", Layer.DOMAIN))
    assert [s.id for s in reg.resolve_order()] == ["G2.02", "G3.01", "G3.02"]


def test_independent_stages_follow_layer_then_id():
    reg = StageRegistry()
    reg.register(_spec("G4.01", Layer.LABELS))
    reg.register(_spec("G3.05", Layer.GEOMETRY))
    reg.register(_spec("G3.01", Layer.GEOMETRY))
    reg.register(_spec("G0.01", Layer.VALIDATION))
    assert [s.id for s in reg.resolve_order()] == ["G0.01", "G3.01", "G3.05", "G4.01"]
    assert [s.id for s in reg.all()] == ["G0.01", "G3.01", "G3.05", "G4.01"]


def test_unknown_dependency_rejected():
    reg = StageRegistry()
    reg.register(_spec("G3.01", Layer.GEOMETRY, "G2.99"))
    with pytest.raises(ValueError, match="unknown stage G2.99"):
        reg.resolve_order()


def test_dependency_on_later_layer_rejected():
    reg = StageRegistry()
    reg.register(_spec("G5.01", Layer.FITTING))
    reg.register(_spec("G3.01", Layer.GEOMETRY, "G5.01"))
    with pytest.raises(ValueError, match="later-layer"):
        reg.resolve_order()


def test_cycle_rejected():
    reg = StageRegistry()
    reg.register(_spec("G3.01", Layer.GEOMETRY, "G3.02"))
    reg.register(_spec("G3.02", Layer.GEOMETRY, "G3.01"))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order()


def test_order_is_cached_until_next_registration():
    reg = StageRegistry()
    reg.register(_spec("G0.01", Layer.VALIDATION))
    first = reg.resolve_order()
    first.clear()
    assert [s.id for s in reg.resolve_order()] == ["G0.01"]
    reg.register(_spec("G1.01", Layer.NORMALIZATION, "G0.01"))
    assert [s.id for s in reg.resolve_order()] == ["G0.01", "G1.01"]


def test_gauge_stages_resolve_in_paint_order(pipeline):
    ids = [s.id for s in get_registry().resolve_order()]
    assert ids == [
        "G0.01",
        "G1.01", "G1.02",
        "G2.01", "G2.02",
        "G3.01", "G3.02", "G3.03", "G3.04", "G3.05",
        "G4.01", "G4.02", "G4.03", "G4.04",
        "G5.01",
    ]

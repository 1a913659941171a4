"""
calkhmer.engines.factory
------------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from calkhmer.engines.calendar import BoditheyCalendar
from calkhmer.engines.specs import EngineSpec


def make_engine(spec: EngineSpec) -> BoditheyCalendar:
    """The universal entry point."""
    if spec.kind == "bodithey":
        return BoditheyCalendar(id=spec.id, params=spec.payload)
    raise TypeError(f"Unknown engine kind: {spec.kind!r}")

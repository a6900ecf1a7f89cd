# design_capacity_planner/planner/services/estimation/bands.py

from __future__ import annotations

from typing import Optional

from planner.services.estimation.interfaces import BandThresholds, SizeBand

DEFAULT_BAND_THRESHOLDS = BandThresholds()


def map_score_to_band(score: float, thresholds: Optional[BandThresholds] = None) -> SizeBand:
    """Map a weighted score onto a size band.

    Bands are half-open on the left: (-inf, xs] -> XS, (xs, s] -> S,
    (s, m] -> M, (m, l] -> L, (l, +inf) -> XL.
    """
    t = thresholds or DEFAULT_BAND_THRESHOLDS
    if score <= t.xs:
        return SizeBand.XS
    if score <= t.s:
        return SizeBand.S
    if score <= t.m:
        return SizeBand.M
    if score <= t.l:
        return SizeBand.L
    return SizeBand.XL


__all__ = ["DEFAULT_BAND_THRESHOLDS", "map_score_to_band"]

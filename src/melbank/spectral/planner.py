"""Band-edge planning for the Slaney Mel filterbank layout."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SlaneyLayout:
    """Constants of the 40-band Malcolm Slaney Mel layout.

    The first ``linear_filters`` anchors are spaced linearly from
    ``lowest_frequency``; the remaining anchors grow geometrically by
    ``log_spacing`` from the last linear one.
    """

    lowest_frequency: float = 133.3333
    linear_spacing: float = 66.66666666
    log_spacing: float = 1.0711703
    linear_filters: int = 13
    log_filters: int = 27

    @property
    def n_filters(self) -> int:
        return self.linear_filters + self.log_filters


SLANEY = SlaneyLayout()


@dataclass(frozen=True)
class FilterEdges:
    """Lower, center and upper frequencies (Hz) of each triangular filter."""

    lower: np.ndarray
    center: np.ndarray
    upper: np.ndarray

    def __len__(self) -> int:
        return int(self.lower.shape[0])

    @property
    def heights(self) -> np.ndarray:
        return triangle_heights(self)


def anchor_frequencies(layout: SlaneyLayout = SLANEY) -> np.ndarray:
    """Return the ``n_filters + 2`` anchor frequencies of ``layout`` in Hz."""
    n_anchors = layout.n_filters + 2
    anchors = np.empty(n_anchors, dtype=np.float64)

    k = np.arange(layout.linear_filters, dtype=np.float64)
    anchors[: layout.linear_filters] = (
        layout.lowest_frequency + k * layout.linear_spacing
    )
    last_linear = anchors[layout.linear_filters - 1]

    # log part also supplies the two trailing anchors of the last triangle
    exponents = np.arange(1, n_anchors - layout.linear_filters + 1, dtype=np.float64)
    anchors[layout.linear_filters :] = last_linear * np.power(
        layout.log_spacing, exponents
    )
    return anchors


def plan_edges(layout: SlaneyLayout = SLANEY) -> FilterEdges:
    """Slice the anchor sequence into 50%-overlapping triangle edges."""
    anchors = anchor_frequencies(layout)
    return FilterEdges(
        lower=anchors[:-2].copy(),
        center=anchors[1:-1].copy(),
        upper=anchors[2:].copy(),
    )


def triangle_heights(edges: FilterEdges) -> np.ndarray:
    """Peak weights giving each continuous triangle unit area."""
    return 2.0 / (edges.upper - edges.lower)

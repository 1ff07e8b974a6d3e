"""Filterbank coefficient container."""

from __future__ import annotations

import numpy as np

from ..errors import InvalidParameterError


class Filterbank:
    """Dense ``(n_filters, n_bins)`` weight matrix, one filter per row.

    The caller owns the instance; builders such as
    :func:`melbank.spectral.compute_mel_filterbank` only mutate
    :attr:`coeffs` in place.
    """

    def __init__(
        self,
        n_filters: int,
        n_bins: int,
        *,
        dtype: np.dtype | type | str = np.float64,
    ) -> None:
        if n_filters <= 0:
            raise InvalidParameterError(
                f"n_filters must be a positive integer, got {n_filters}"
            )
        if n_bins <= 0:
            raise InvalidParameterError(
                f"n_bins must be a positive integer, got {n_bins}"
            )
        resolved = np.dtype(dtype)
        if not np.issubdtype(resolved, np.floating):
            raise InvalidParameterError(f"dtype must be floating, got {resolved}")
        self._coeffs = np.zeros((int(n_filters), int(n_bins)), dtype=resolved)

    @property
    def coeffs(self) -> np.ndarray:
        return self._coeffs

    @property
    def n_filters(self) -> int:
        return int(self._coeffs.shape[0])

    @property
    def n_bins(self) -> int:
        return int(self._coeffs.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n_filters, self.n_bins)

    def zero(self) -> None:
        self._coeffs.fill(0.0)

    def set_coeffs(self, coeffs: np.ndarray) -> None:
        """Copy ``coeffs`` into the filterbank, keeping its shape and dtype."""
        arr = np.asarray(coeffs)
        if arr.shape != self.shape:
            raise InvalidParameterError(
                f"coeffs shape must be {self.shape}, got {arr.shape}"
            )
        self._coeffs[...] = arr

    def apply(self, spectrum: np.ndarray) -> np.ndarray:
        """Project a magnitude spectrum onto the filter axis.

        Parameters
        ----------
        spectrum : ndarray
            Magnitudes shaped ``(n_bins,)`` or ``(n_bins, n_frames)``.

        Returns
        -------
        ndarray
            Band energies shaped ``(n_filters,)`` or ``(n_filters, n_frames)``.
        """
        spec = np.asarray(spectrum)
        if spec.ndim not in (1, 2) or spec.shape[0] != self.n_bins:
            raise InvalidParameterError(
                "spectrum must be shaped (n_bins,) or (n_bins, n_frames) with "
                f"n_bins={self.n_bins}, got {spec.shape}"
            )
        if np.iscomplexobj(spec):
            spec = np.abs(spec)
        return self._coeffs @ spec

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n_filters={self.n_filters}, "
            f"n_bins={self.n_bins}, dtype={self._coeffs.dtype})"
        )

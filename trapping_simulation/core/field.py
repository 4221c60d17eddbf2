"""
Longitudinal magnetic field profiles of the source.
"""

from __future__ import annotations

import os
from typing import Union

import numpy as np

from .constants import SOURCE_LENGTH
from .data_classes import MagneticField, SampledField, UniformField


def field_at(field: MagneticField, z: float) -> float:
    """Field magnitude (T) at longitudinal position ``z`` (m)."""
    if isinstance(field, UniformField):
        return field.b_reference
    return float(field.function(z))


def mirror_field(
    b_center: float,
    b_max: float,
    half_length: float = SOURCE_LENGTH / 2.0,
) -> SampledField:
    """Parabolic magnetic mirror normalized to the field in the source center.

    ``B(z) = b_center * (1 + (b_max / b_center - 1) * (z / half_length)²)``

    Parameters
    ----------
    b_center : float
        Field at z = 0 (T), also used as the reference field.
    b_max : float
        Field at ``z = ±half_length`` (T).
    half_length : float, optional
        Distance from the center to the field maximum (m).
    """
    if b_center <= 0.0 or b_max <= 0.0:
        raise ValueError("Mirror field magnitudes must be positive")
    if half_length <= 0.0:
        raise ValueError(f"Mirror half length must be positive, got {half_length}")
    ratio = b_max / b_center - 1.0

    def function(z: float) -> float:
        return b_center * (1.0 + ratio * (z / half_length) ** 2)

    return SampledField(function=function, b_reference=b_center)


def field_from_table(z_points, b_points, b_reference: float) -> SampledField:
    """Linearly interpolated field profile from tabulated ``(z, B)`` values.

    Outside the table the edge values are used.
    """
    z_points = np.asarray(z_points, dtype=float)
    b_points = np.asarray(b_points, dtype=float)
    if z_points.ndim != 1 or z_points.shape != b_points.shape:
        raise ValueError("Field table requires two 1D arrays of equal length")
    if z_points.size < 2:
        raise ValueError("Field table requires at least two points")
    if np.any(b_points <= 0.0):
        raise ValueError("Field table contains non-positive field values")

    order = np.argsort(z_points)
    z_sorted = z_points[order]
    b_sorted = b_points[order]

    def function(z: float) -> float:
        return float(np.interp(z, z_sorted, b_sorted))

    return SampledField(function=function, b_reference=b_reference)


def load_field_map(file_path: Union[str, os.PathLike], b_reference: float) -> SampledField:
    """Load a two-column ``z;B`` field map (m, T) from disk.

    Comma separated files are accepted as well. Header lines that do not
    parse as numbers are skipped.
    """
    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"Field map file '{file_path}' does not exist.")

    with open(file_path, 'r', encoding='utf-8') as f:
        lines = f.readlines()

    delimiter = ';' if any(';' in line for line in lines) else ','
    skip_rows = 0
    for line in lines:
        try:
            float(line.split(delimiter)[0])
            break
        except ValueError:
            skip_rows += 1

    try:
        data = np.loadtxt(file_path, delimiter=delimiter, skiprows=skip_rows, usecols=(0, 1), dtype=float, ndmin=2)
    except Exception as e:
        raise ValueError(f"Could not load field map '{file_path}': {e}")

    return field_from_table(data[:, 0], data[:, 1], b_reference)

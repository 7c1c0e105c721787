"""Inertia tensors for the vehicle body and its three momentum wheels."""

from __future__ import annotations

import numpy as np

from ..config import PhysicalConstants


def body_inertia_tensor(constants: PhysicalConstants) -> np.ndarray:
    """Return diag(A, B, C) for the vehicle body."""
    return np.diag(np.array(constants.body_inertias, dtype=float))


def wheel_inertia_tensor(constants: PhysicalConstants, axis: int) -> np.ndarray:
    """Return the inertia tensor of the wheel spinning about body ``axis``.

    The spin inertia ``I`` sits on the wheel's own principal axis and the
    transverse inertia ``J`` on the remaining two.

    Args:
        constants: Physical constants supplying ``I`` and ``J``.
        axis: Body axis index (0 = x, 1 = y, 2 = z).

    Returns:
        3x3 diagonal inertia tensor (kg*m^2).
    """
    if axis not in (0, 1, 2):
        raise ValueError("axis must be 0, 1, or 2")
    diag = np.full(3, constants.transverse_inertia_J, dtype=float)
    diag[axis] = constants.spin_inertia_I
    return np.diag(diag)


def wheel_inertia_tensors(constants: PhysicalConstants) -> np.ndarray:
    """Stack the three wheel tensors into a (3, 3, 3) array indexed by wheel."""
    return np.stack([wheel_inertia_tensor(constants, k) for k in range(3)])


def total_inertia_tensor(constants: PhysicalConstants) -> np.ndarray:
    """Return diag(J_I, J_II, J_III), the principal inertias of body plus wheels."""
    return np.diag(np.array(constants.total_inertias, dtype=float))

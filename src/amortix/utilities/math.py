"""Financial mathematics for amortization schedules.

Level (annuity) payments, scalar and vectorized with JAX, and the residual
floor applied to running balances.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

# Balances smaller than this in magnitude are reported as zero.
RESIDUAL_EPSILON = 0.01

# Below this the periodic rate is treated as zero.
ZERO_RATE_TOLERANCE = 1e-10


def floor_residual(balance: float) -> float:
    """Report a running balance, flooring floating-point residue to zero.

    Applied identically to positive and negative values, so a genuine
    leftover below one cent is also reported as zero.

    Example:
        >>> floor_residual(0.004)
        0.0
        >>> floor_residual(-1e-9)
        0.0
        >>> floor_residual(12.5)
        12.5
    """
    if abs(balance) < RESIDUAL_EPSILON:
        return 0.0
    return balance


def annuity_payment(principal: float, rate: float, n_periods: float) -> float:
    """Level payment that repays ``principal`` over ``n_periods``.

    Uses the formula: A = P * r * (1 + r)^n / ((1 + r)^n - 1)

    Args:
        principal: Amount to repay
        rate: Rate per period (e.g., 0.01 for 1% per period)
        n_periods: Number of periods; may be fractional

    Returns:
        Payment per period; 0.0 when there is no period to repay over

    Example:
        >>> annuity_payment(1200.0, 0.12, 1)  # doctest: +ELLIPSIS
        1344.0...
    """
    if n_periods <= 0:
        return 0.0

    if abs(rate) < ZERO_RATE_TOLERANCE:
        # Limit of the annuity formula as r -> 0
        return principal / n_periods

    growth = (1.0 + rate) ** n_periods
    return principal * rate * growth / (growth - 1.0)


@jax.jit
def annuity_payment_vectorized(
    principal: jnp.ndarray,
    rate: jnp.ndarray,
    n_periods: jnp.ndarray,
) -> jnp.ndarray:
    """Vectorized level payment for JAX arrays.

    Args:
        principal: Array of amounts to repay
        rate: Array of rates per period
        n_periods: Array of period counts

    Returns:
        Array of level payments, 0 where ``n_periods <= 0``

    Example:
        >>> principals = jnp.array([100000.0, 200000.0])
        >>> rates = jnp.array([0.05 / 12, 0.04 / 12])
        >>> periods = jnp.array([12, 24])
        >>> payments = annuity_payment_vectorized(principals, rates, periods)

    Note:
        This function is JIT-compiled. Results use JAX's default dtype
        (float32 unless x64 is enabled).
    """
    no_periods = n_periods <= 0
    safe_periods = jnp.where(no_periods, 1, n_periods)

    near_zero_rate = jnp.abs(rate) < ZERO_RATE_TOLERANCE
    safe_rate = jnp.where(near_zero_rate, 1.0, rate)

    growth = jnp.power(1.0 + safe_rate, safe_periods)
    level = principal * safe_rate * growth / (growth - 1.0)
    level = jnp.where(near_zero_rate, principal / safe_periods, level)
    return jnp.where(no_periods, 0.0, level)

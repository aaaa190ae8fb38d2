"""
Mixing-ratio optimization.

Finds weights ``w`` for the rows of a palette matrix ``C`` (one row per
palette color, three columns in some color space) so that ``Cᵀw`` lands on a
target vector ``t``::

    min_w  ||Cᵀw - t||^2 + 100 * (sum(w) - 1)^2 + 1000 * #{i : w_i < 0.01}

The simplex constraint is soft: the minimizer is unconstrained and the
weights are normalized to sum to exactly 1 afterwards.

The near-zero term is a modeling choice, not sparsity control. It steers the
search toward balanced mixes that use every palette color, so a mix that an
exact subset of the palette would match perfectly may be out of reach.
"""

import logging
from typing import Dict, Optional, Tuple

import numpy as np
from scipy.optimize import minimize

from .errors import EmptyPaletteError, OptimizationError

logger = logging.getLogger(__name__)


SUM_PENALTY = 100.0
ZERO_THRESHOLD = 0.01
ZERO_PENALTY = 1000.0
ZERO_GRADIENT_PENALTY = 2000.0

# scipy methods that make use of ``jac``
GRADIENT_METHODS = frozenset(
    {"cg", "bfgs", "newton-cg", "l-bfgs-b", "tnc", "slsqp", "trust-constr"}
)

DEFAULT_OPTIONS: Dict[str, dict] = {
    "nelder-mead": {"maxiter": 20000, "maxfev": 40000, "xatol": 1e-10, "fatol": 1e-12},
}
FALLBACK_OPTIONS = {"maxiter": 10000}


def mix_colors(weights: np.ndarray, color_table: np.ndarray) -> np.ndarray:
    """Weighted sum of the palette rows, ``Cᵀw``."""
    return color_table.T @ weights


def match_error(
    weights: np.ndarray, color_table: np.ndarray, target: np.ndarray
) -> float:
    """Squared distance between the mix and the target, without penalties."""
    diff = mix_colors(weights, color_table) - target
    return float(diff @ diff)


def color_distance(
    weights: np.ndarray, color_table: np.ndarray, target: np.ndarray
) -> float:
    """
    Objective: squared distance to the target plus the two penalty terms.

    Args:
        weights: Candidate weights, one per palette row.
        color_table: ``(n, 3)`` palette matrix.
        target: Target color vector of length 3.
    """
    dist = match_error(weights, color_table, target)

    total = np.sum(weights)
    penalty = SUM_PENALTY * (total - 1.0) ** 2

    zero_penalty = ZERO_PENALTY * np.count_nonzero(weights < ZERO_THRESHOLD)
    return dist + penalty + zero_penalty


def color_gradient(
    weights: np.ndarray, color_table: np.ndarray, target: np.ndarray
) -> np.ndarray:
    """
    Gradient of ``color_distance`` with respect to the weights.

    The near-zero penalty is a step, so its true derivative is zero; a
    constant ``ZERO_GRADIENT_PENALTY`` is added instead on every weight below
    the threshold.
    """
    diff = mix_colors(weights, color_table) - target
    grad = 2.0 * (color_table @ diff)

    grad += 2.0 * SUM_PENALTY * (np.sum(weights) - 1.0)

    grad[weights < ZERO_THRESHOLD] += ZERO_GRADIENT_PENALTY
    return grad


class RatioSolver:
    """
    Solves for the mixing ratios of a palette matrix.

    Wraps ``scipy.optimize.minimize``; the analytic gradient is handed to
    methods that use one.

    Gradient methods are not drop-in replacements for the default
    Nelder-Mead. The near-zero penalty is a step, so ``BFGS`` and ``CG``
    tend to stop with a precision-loss failure and ``L-BFGS-B`` can settle on
    a visibly different mix.
    """

    def __init__(self, method: str = "Nelder-Mead", options: Optional[dict] = None):
        """
        Args:
            method: Any unconstrained ``scipy.optimize.minimize`` method.
            options: Solver options, merged over the defaults for ``method``.
        """
        self.method = method
        self.options = dict(DEFAULT_OPTIONS.get(method.lower(), FALLBACK_OPTIONS))
        if options:
            self.options.update(options)

    @property
    def uses_gradient(self) -> bool:
        return self.method.lower() in GRADIENT_METHODS

    def solve(
        self, color_table: np.ndarray, target: np.ndarray
    ) -> Tuple[np.ndarray, float]:
        """
        Find mixing weights for ``color_table`` that reproduce ``target``.

        Args:
            color_table: ``(n, 3)`` palette matrix, one row per color.
            target: Target color vector of length 3, same space as the table.

        Returns:
            weights: Array of n weights that sum to 1.
            error: Squared distance between the returned mix and the target
                in the table's space. Penalties are left out, so a weight
                resting on the near-zero threshold does not inflate it.

        Raises:
            EmptyPaletteError: If the table has no rows.
            OptimizationError: If the minimizer fails or yields non-finite
                or unnormalizable weights.
        """
        color_table = np.asarray(color_table, dtype=float)
        target = np.asarray(target, dtype=float)
        if color_table.ndim != 2 or color_table.shape[1] != 3:
            if color_table.size == 0:
                raise EmptyPaletteError()
            raise ValueError(f"color table must be (n, 3), got {color_table.shape}")
        n_colors = color_table.shape[0]
        if n_colors == 0:
            raise EmptyPaletteError()
        if target.shape != (3,):
            raise ValueError(f"target must have 3 components, got {target.shape}")

        initial_guess = np.ones(n_colors) / n_colors
        logger.debug("Solving %d-color mix with %s", n_colors, self.method)

        result = minimize(
            fun=color_distance,
            x0=initial_guess,
            args=(color_table, target),
            method=self.method,
            jac=color_gradient if self.uses_gradient else None,
            options=self.options,
        )

        if not result.success:
            raise OptimizationError(str(result.message), result)
        x = np.asarray(result.x, dtype=float)
        if not np.isfinite(result.fun) or not np.all(np.isfinite(x)):
            raise OptimizationError("objective or weights are not finite", result)

        # Clip negatives (the search is unconstrained), then normalize to
        # ensure weights sum to exactly 1.0
        x = np.clip(x, 0.0, 1.0)
        total = np.sum(x)
        if not total > 0:
            raise OptimizationError(f"weights sum to {total}, cannot normalize", result)
        weights = x / total

        error = match_error(weights, color_table, target)
        logger.debug(
            "Solved in %s iterations (%s evaluations), error %.3g",
            result.get("nit"), result.get("nfev"), error,
        )
        return weights, error


def compute_color_ratios(
    color_table: np.ndarray,
    target: np.ndarray,
    method: str = "Nelder-Mead",
    options: Optional[dict] = None,
) -> Tuple[np.ndarray, float]:
    """Shortcut for ``RatioSolver(method, options).solve(color_table, target)``."""
    return RatioSolver(method, options).solve(color_table, target)

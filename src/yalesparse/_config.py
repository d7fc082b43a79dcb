"""
Global configuration for yalesparse.

Provides:
- Default zero sentinel for matrices created without one
- Density precision used by ``YaleSparseMatrix.inspect``
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from ._errors import InvalidArgumentError

logger = logging.getLogger("yalesparse.config")

# Marks "argument not given" so that None stays a valid sentinel
_UNSET = object()


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """
    Global configuration singleton.

    Holds the defaults consulted when a matrix is constructed or rendered.
    """

    def __init__(self):
        self._default_zero: Any = None
        self._density_precision = 2

    @property
    def default_zero(self) -> Any:
        """Sentinel used by ``YaleSparseMatrix()`` when no zero is given."""
        return self._default_zero

    @default_zero.setter
    def default_zero(self, value: Any):
        self._default_zero = value

    @property
    def density_precision(self) -> int:
        """Number of decimals shown for the density percentage."""
        return self._density_precision

    @density_precision.setter
    def density_precision(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidArgumentError(
                f"density_precision must be a non-negative int, got {value!r}"
            )
        self._density_precision = value

    def reset(self) -> None:
        """Restore the initial defaults."""
        self.__init__()


# Global config instance
_config = _Config()


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    return _config


def set_defaults(zero: Any = _UNSET, density_precision: Any = _UNSET) -> None:
    """
    Set library-wide defaults.

    Args:
        zero: Sentinel for matrices created without an explicit zero.
        density_precision: Decimals shown for density in ``inspect``.

    Example:
        >>> yalesparse.set_defaults(zero=0.0)
        >>> YaleSparseMatrix()[3, 3]
        0.0
    """
    if zero is not _UNSET:
        _config.default_zero = zero
        logger.debug("default zero set to %r", zero)
    if density_precision is not _UNSET:
        _config.density_precision = density_precision
        logger.debug("density precision set to %d", density_precision)


def get_defaults() -> Dict[str, Any]:
    """Return the current defaults as a dict."""
    return {
        'zero': _config.default_zero,
        'density_precision': _config.density_precision,
    }


def reset_defaults() -> None:
    """Restore the initial defaults (zero=None, density_precision=2)."""
    _config.reset()
    logger.debug("defaults reset")

"""Exceptions raised by the Z/pZ table and polynomial layers."""

from __future__ import annotations


class ZpzError(Exception):
    """Base class for every failure reported by zpzpoly."""


class InvalidModulus(ZpzError, ValueError):
    """Raised when the modulus is outside [P_MIN, P_MAX]."""


class DegreeTooLarge(ZpzError, ValueError):
    """Raised when a declared polynomial degree exceeds N_MAX."""


class CoefficientCountError(ZpzError, ValueError):
    """Raised when fewer coefficients than ``degree + 1`` are supplied."""


class ModulusMismatch(ZpzError, ValueError):
    """Raised when operands were built over different moduli."""


class DivisionByZero(ZpzError, ZeroDivisionError):
    """Raised when dividing by the zero polynomial."""


class DegreeMismatch(ZpzError):
    """Raised when the divisor's degree exceeds the dividend's."""


class NonInvertibleLeadingCoefficient(ZpzError):
    """Raised when the divisor's leading coefficient is not a unit mod p."""

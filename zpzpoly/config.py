"""Global configuration for zpzpoly."""

import os

# ---------- Modulus ceiling ----------
# Tables are dense p x p arrays, so p stays small.
P_MAX = int(os.environ.get("ZPZPOLY_P_MAX", "100"))
P_MIN = 2

# ---------- Polynomial degree ceiling ----------
N_MAX = int(os.environ.get("ZPZPOLY_N_MAX", "1000"))

# ---------- Zero polynomial ----------
ZERO_DEGREE = -1

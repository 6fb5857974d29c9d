"""Constants and environment-driven settings for polycalc."""

import os

import numpy as np

# --- numeric bounds ---
COEFF_MIN = int(np.iinfo(np.int64).min)
COEFF_MAX = int(np.iinfo(np.int64).max)
EXP_MAX = 2**31 - 1       # largest exponent accepted by the parser
ARG_MAX = 2**64 - 1       # largest DEG_BY / COMPOSE argument
MAX_NESTING = 100         # deepest bracket nesting accepted in a polynomial

# --- input ---
COMMENT_PREFIX = "#"
INPUT_ENCODING = "utf-8"
INPUT_ERRORS = "surrogateescape"  # undecodable bytes fail the character checks

# --- logging ---
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LOG_LEVEL = os.environ.get("POLYCALC_LOG_LEVEL", "WARNING").upper()

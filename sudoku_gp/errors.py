"""
sudoku_gp/errors.py - Error types
"""


class ConfigurationError(ValueError):
    """Raised for malformed boards, tree heights, names or run parameters.

    These indicate a setup mistake, so they are never retried.
    """

"""Dense matrix algebra (matrixcalc.matrix) and a stdin-driven matrix calculator (matrixcalc.cli)."""

__version__ = "0.1.0"
__all__ = ["matrix", "cli"]
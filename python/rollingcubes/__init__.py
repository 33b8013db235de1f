"""Rolling Cubes — a 4×4 sliding puzzle played with dice."""

__version__ = "1.0.0"

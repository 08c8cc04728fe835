"""Building blocks of the HQC key encapsulation mechanism."""

__version__ = "0.1.0"
__all__ = ["gf2x", "params", "parsing", "reed_muller", "shake", "vector"]
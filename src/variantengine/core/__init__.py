"""Core utilities shared across syntax and runtime layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- syntax <- runtime

Exports:
    ParamValue: Scalar accepted as a runtime parameter
    Params: Mapping of parameter names to values
    format_value: Producer-compatible text form of a parameter value

Python 3.13+.
"""

from .values import ParamValue, Params, format_value, lookup

__all__ = ["ParamValue", "Params", "format_value", "lookup"]

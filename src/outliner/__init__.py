"""Outliner - Clean traced vector outlines for solid extrusion.

Outliner takes the flattened point samples of a traced vector path, which may be
noisy or self-overlapping, and reduces them to a clean, minimal polygon that is
centered and scaled so its largest dimension is exactly 1.

Example:
    $ outliner logo-trace.json --mode aggressive

This will create logo-trace-cleaned.json holding the simplified, normalized
outline ready to be extruded.
"""

__version__ = "0.1.0"
__author__ = "Outliner Contributors"

__all__ = ["__author__", "__version__"]

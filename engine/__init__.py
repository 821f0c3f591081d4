"""
Translation and multi-variable sampling engine.
"""

from .container import RandomVariableContainer
from .runner import run_sampling
from .translation import fit, latin_hypercube, sample, sample_lh, sample_mc

__all__ = [
    "RandomVariableContainer",
    "run_sampling",
    "sample",
    "fit",
    "sample_mc",
    "sample_lh",
    "latin_hypercube",
]

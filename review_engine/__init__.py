"""
Review Engine - Performance review cycle domain model and rule engine.

Manages review periods with phased deadlines, peer nominations,
calibration, locked final scores with bonus-tier classification,
and post-hoc score adjustment requests.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

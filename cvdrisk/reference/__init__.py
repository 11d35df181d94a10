"""Published reference data: point charts, risk tables and model coefficients.

All values are module-level constants and are never modified at runtime.
"""

"""City Recipes Application Package - city insights, forecasts and recipe notes.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

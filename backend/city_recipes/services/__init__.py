"""Services Layer - request orchestration between upstream clients and the recipe store.

Invariants:
    - Upstream calls within one request are sequential: city lookup always first
    - Services raise typed CityRecipesError subclasses; HTTP mapping happens in api/
"""

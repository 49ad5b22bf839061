"""Infrastructure Layer - upstream HTTP clients and logging setup.

Invariants:
    - Every httpx exception is mapped to UpstreamError before leaving this layer
    - One shared httpx.AsyncClient per process, opened and closed by the app lifespan
"""

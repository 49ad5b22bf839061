"""Pydantic Schemas - request/response validation for API endpoints and upstream payloads.

Invariants:
    - Schemas validate at system boundary (user input, upstream API responses)
    - JSON field names are camelCase on the wire, snake_case in Python
"""

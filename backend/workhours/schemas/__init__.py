"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; domain rules (name
      trimming, uniqueness) stay in the services
    - Response models read service dataclasses via from_attributes
"""

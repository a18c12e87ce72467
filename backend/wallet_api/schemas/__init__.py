"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - JSON field names are camelCase (alias_generator); Python attributes stay snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

CAMEL_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, from_attributes=True,
)

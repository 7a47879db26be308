"""API-specific request/response models.

Domain models are in shared.models and are reused by the routes directly.

Modules:
- common: Validation error envelope
"""

__all__: list[str] = []

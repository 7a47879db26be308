"""TinyHouse client view layer.

View-models for the header search bar, the host listing form, the Stripe
connect callback and the user page. Each exposes event handlers that mutate
local UI state and a ``render()`` returning a pydantic view description.
"""

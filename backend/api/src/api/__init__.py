"""TinyHouse server REST API."""

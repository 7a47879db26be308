"""Shared models, services and utilities for the TinyHouse server and client."""

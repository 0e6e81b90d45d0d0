"""Unit tests for core domain logic.

These tests exercise core business logic without external dependencies.
All external ports are replaced with in-memory fakes from tests/fakes/
or with autospecced mock objects.
"""

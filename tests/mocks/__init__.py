"""Test doubles for essential_memories."""

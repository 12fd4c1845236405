"""Canonical record types and their declarative wire mappings."""

"""Records API: the surface views and forms call.

Rules for this layer:

1. No mapping logic here - delegate to recordbridge.parsing
2. Return canonical records or wire payload dicts only
"""

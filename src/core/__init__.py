"""
Core conversion primitives, domain models, and contracts.

This module contains the foundational building blocks that are independent
of the UI layer (forms, rendering, routing).
"""

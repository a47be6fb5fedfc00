"""
Core value types, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of any renderer or iteration driver.
"""

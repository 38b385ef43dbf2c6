"""
Application Layer

Use cases, DTOs and the interfaces they depend on.
"""

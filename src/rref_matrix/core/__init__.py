"""
Core domain model, elimination algorithms, and serialized contracts.

This module contains the building blocks that are independent of any
entry point (CLI, scripts, etc.).
"""

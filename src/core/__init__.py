"""
Core domain models, error taxonomy and payload contracts.

This module contains the foundational building blocks that are independent
of external collaborators (minters, savings wrappers, vaults, tokens).
"""

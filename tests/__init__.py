"""
Test suite for SaveWrapper

Contains:
- tests/fakes.py       : In-memory collaborators (tokens, minter, savings, vault)
- tests/unit/          : Unit tests for individual modules
- tests/integration/   : End-to-end scenarios over the full wrapper
"""

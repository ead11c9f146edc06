"""Aura Test Suite

Test organization:
- unit/: Unit tests for individual modules
  - voice/: Detection, normalization, routing, configuration
  - cli/: The `aura` command line

Running tests:
    # All tests
    pytest

    # Specific module
    pytest tests/unit/voice/
"""

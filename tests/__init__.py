"""Test suite for errorx.

Test structure:
- unit/: Unit tests - each module in isolation (structlog mocked where needed)
- integration/: Integration tests - error trees built, read, rendered and logged end to end
"""

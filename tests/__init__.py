"""Test suite for the order-taking workflow.

Test structure follows the test pyramid:
- unit/: Unit tests - constrained values, stages and adapters in isolation
- integration/: Integration tests - handler wired to real adapters, real
  structlog output, the address service client over mocked HTTP
"""

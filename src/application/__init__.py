"""Application layer - Use cases and orchestration.

Structure:
- workflows/: The place order workflow, a pipeline of pure stage functions
  with injected collaborators
- commands/: Command dataclasses and handlers (the entry point callers use)

The application layer orchestrates domain logic and never imports
infrastructure; collaborators arrive through domain protocols.
"""

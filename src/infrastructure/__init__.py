"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Product catalog lookups
- Address verification (remote service over HTTP, or an in-process stub)
- Acknowledgement letters (rendering and delivery)
- Structured logging

Structure:
- catalog/: In-memory product catalog
- address/: Address verification clients
- acknowledgement/: Letter renderer and sender
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

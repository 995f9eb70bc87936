"""Domain layer - Pure business logic.

This layer contains the order snapshots, constrained value objects,
collaborator protocols (ports), errors and domain events of the order-taking
workflow. The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- validators/: Constrained-value rules shared by every value object
- value_objects/: Value objects (immutable, validated on construction)
- entities/: Order snapshots (unvalidated, validated, priced)
- protocols/: Collaborator interfaces (catalog, address service, letters)
- errors/: Workflow failure types
- events/: Domain events (things that happened to an order)

The domain layer defines WHAT the business does, not HOW it's implemented.
"""

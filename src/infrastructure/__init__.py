"""Infrastructure layer - Adapters for domain protocols.

Structure:
- authorization/: Permission table loading from JSON files
- directory/: In-memory user directory and demo accounts
- sessions/: In-memory session store
- security/: bcrypt password hashing
- events/: In-memory event bus and logging handler
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

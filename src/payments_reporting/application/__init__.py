"""Application layer - Query services and port definitions.

This layer contains:
- Services: Read-only queries over the payment snapshot
- Ports: Abstract interfaces for the repository and the clock
- DTOs: Data transfer objects for aggregated query results

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""

"""Application layer: DTOs, reader interfaces, pure services, and use cases."""

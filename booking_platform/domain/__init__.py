"""Domain layer - core business logic and interfaces.

This layer contains:
- Domain entities (Booking, Payment, User)
- Repository, gateway and presenter interfaces (ports)
- Domain exceptions
"""

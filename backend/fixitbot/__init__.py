"""FixItBot backend package following Clean Architecture.

Layers:
- domain: damage estimation rules, entities and use cases
- data: external collaborators (detector, chat agent, PDF renderer) and catalogs
- presentation: FastAPI routers and models
- core: configuration, DI, and utilities
"""

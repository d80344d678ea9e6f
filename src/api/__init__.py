"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface for the application. Handles requests, responses,
    bearer-token authentication and error envelopes. No business logic.

Contains:
    - FastAPI routers (auth, tasks)
    - Request/Response models (Pydantic, camelCase JSON)
    - Dependency injection setup
    - Middleware configuration (CORS, logging)

Does NOT contain:
    - Business logic (belongs to Domain layer)
    - Use-case orchestration (belongs to Application layer)
    - Database operations (belongs to Infrastructure layer)
"""

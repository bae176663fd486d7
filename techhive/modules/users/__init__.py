"""
User Management Module

- auth: token authentication stage
- domain: domain and request models
- services: business logic and validation
- repositories: in-memory data access
- api: REST API endpoints
"""

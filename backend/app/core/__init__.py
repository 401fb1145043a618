# app/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Default login creation and transcript seeding
- db: Database configuration and connection management
- limiter: Concurrency limiter for outbound model calls
- security: Authentication and password hashing
"""

# app/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: Dashboard login account
- Transcript: Stored voice-note text
- Summary: Model-generated summary (belongs to Transcript)
"""
from .user import User
from .transcript import Transcript
from .summary import Summary

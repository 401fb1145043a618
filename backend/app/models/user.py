"""
Database model for users.
Represents a dashboard login account.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Username must be unique across all users
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # Login name (unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"

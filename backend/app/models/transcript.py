# app/models/transcript.py
import uuid
from tortoise import fields, models

class Transcript(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    title = fields.CharField(max_length=255, unique=True)  # Seed upserts are keyed by title
    content = fields.TextField()
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "transcripts"

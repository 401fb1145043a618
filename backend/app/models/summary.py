"""
Database model for summaries.
One row per successful model call; rows are never updated by the summarizer.
"""
import uuid
from tortoise import fields, models

class Summary(models.Model):
    """
    Summary database model.

    Several rows may exist for the same (transcript, model) pair. The newest
    one is found by ordering on created_at descending.

    Relationships:
    - Belongs to a Transcript (many-to-one); cascade delete
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    transcript = fields.ForeignKeyField(
        "models.Transcript",
        related_name="summaries",
        on_delete=fields.CASCADE
    )
    model_used = fields.CharField(max_length=255, index=True)  # OpenRouter model identifier
    prompt = fields.TextField()
    temperature = fields.FloatField()
    content = fields.TextField()
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "summaries"

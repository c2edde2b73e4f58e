from django.db import models
from django.db.models import Q
from django.utils import timezone
import uuid


class PiggyBank(models.Model):
    """Shared savings goal owned by a couple."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    couple = models.ForeignKey('couples.Couple', on_delete=models.CASCADE, related_name='piggybanks')
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'piggybanks'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['couple', 'end_date'], name='piggybanks_couple_end_idx'),
        ]

    def __str__(self):
        return self.title

    def has_ended(self, at=None):
        """True once the end date lies in the past."""
        at = at or timezone.now()
        return self.end_date is not None and self.end_date < at

    @staticmethod
    def open_filter(at=None):
        """Q matching goals without an end date or ending in the future."""
        at = at or timezone.now()
        return Q(end_date__isnull=True) | Q(end_date__gt=at)

    @staticmethod
    def member_filter(user_id):
        """Q matching goals owned by a couple the user belongs to."""
        return Q(couple__partner1_id=user_id) | Q(couple__partner2_id=user_id)

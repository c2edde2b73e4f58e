from django.db import models
import uuid


class ActionEntry(models.Model):
    """Append-only record of a voucher being given, attributed to a member."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    voucher_template = models.ForeignKey(
        'vouchers.VoucherTemplate',
        on_delete=models.CASCADE,
        related_name='action_entries',
    )
    giver = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='action_entries')
    occurred_at = models.DateTimeField()
    notes = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'action_entries'
        ordering = ['-occurred_at']
        verbose_name_plural = 'action entries'
        indexes = [
            models.Index(fields=['voucher_template', 'occurred_at'], name='action_entries_template_idx'),
        ]

    def __str__(self):
        return f"{self.giver} - {self.voucher_template} @ {self.occurred_at:%Y-%m-%d}"

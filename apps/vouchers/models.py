from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
import uuid


class VoucherTemplate(models.Model):
    """Reward definition with a fixed value, scoped to a piggybank."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    piggybank = models.ForeignKey('piggybanks.PiggyBank', on_delete=models.CASCADE, related_name='voucher_templates')
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    amount_cents = models.IntegerField(
        validators=[MinValueValidator(1)],
        help_text="Value in minor currency units",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'voucher_templates'
        ordering = ['created_at']
        constraints = [
            models.CheckConstraint(condition=Q(amount_cents__gt=0), name='voucher_templates_amount_positive'),
        ]

    def __str__(self):
        return f"{self.title} ({self.amount_cents})"

from dataclasses import dataclass
import secrets
import uuid

from django.db import models
from django.db.models import Q, F


def generate_invitation_token():
    """64 hex characters from 32 random bytes."""
    return secrets.token_hex(32)


class CoupleRequestStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'
    REJECTED = 'rejected', 'Rejected'


class RequestDirection(models.TextChoices):
    INCOMING = 'incoming', 'Incoming'
    OUTGOING = 'outgoing', 'Outgoing'


@dataclass(frozen=True)
class ResolvedTarget:
    """Invitee who already has an account."""
    user_id: uuid.UUID


@dataclass(frozen=True)
class UnresolvedTarget:
    """Invitee known only by email until they register."""
    email: str


class Couple(models.Model):
    """Committed pair of partners that jointly own piggybanks."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    partner1 = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='couples_as_partner1')
    partner2 = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='couples_as_partner2')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'couples'
        constraints = [
            models.UniqueConstraint(fields=['partner1'], name='couples_unique_partner1'),
            models.UniqueConstraint(fields=['partner2'], name='couples_unique_partner2'),
            models.CheckConstraint(condition=~Q(partner1=F('partner2')), name='couples_distinct_partners'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.partner1} & {self.partner2}"

    def partner_of(self, user_id):
        """Return the id of the other member."""
        if self.partner1_id == user_id:
            return self.partner2_id
        return self.partner1_id


class CoupleRequest(models.Model):
    """Invitation from one user to another (by account or by email) to form a couple."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    requester = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='sent_couple_requests')
    target_user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='received_couple_requests',
    )
    target_email = models.EmailField(max_length=255, null=True, blank=True)
    invitation_token = models.CharField(
        max_length=64,
        unique=True,
        default=generate_invitation_token,
        editable=False,
    )
    status = models.CharField(
        max_length=20,
        choices=CoupleRequestStatus.choices,
        default=CoupleRequestStatus.PENDING,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    responded_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'couple_requests'
        constraints = [
            # Exactly one of target_user / target_email
            models.CheckConstraint(
                condition=(
                    Q(target_user__isnull=False, target_email__isnull=True)
                    | Q(target_user__isnull=True, target_email__isnull=False)
                ),
                name='couple_requests_single_target',
            ),
            models.UniqueConstraint(
                fields=['requester'],
                condition=Q(status='pending'),
                name='couple_requests_one_pending_per_requester',
            ),
            models.UniqueConstraint(
                fields=['target_user'],
                condition=Q(status='pending'),
                name='couple_requests_one_pending_per_target',
            ),
        ]
        indexes = [
            models.Index(fields=['status', 'created_at'], name='couple_requests_status_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.requester} -> {self.target_user or self.target_email} ({self.status})"

    @property
    def target(self):
        """The invitee as ResolvedTarget or UnresolvedTarget."""
        if self.target_user_id is not None:
            return ResolvedTarget(user_id=self.target_user_id)
        return UnresolvedTarget(email=self.target_email)

    @property
    def is_pending(self):
        return self.status == CoupleRequestStatus.PENDING

    def direction_for(self, user_id):
        if self.requester_id == user_id:
            return RequestDirection.OUTGOING
        return RequestDirection.INCOMING

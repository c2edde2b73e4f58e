"""
Invitation email delivery.

Emails are fire-and-forget: they are scheduled after the surrounding
transaction commits and sent on a small background pool. Failures are
logged and never reach the caller.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from urllib.parse import urlencode

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.db import transaction
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)

INVITATION_SUBJECT = 'PiggyBank Couple Invitation'

_executor = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=settings.INVITATION_EMAIL_WORKERS,
                thread_name_prefix='invitation-mail',
            )
        return _executor


def build_invitation_url(*, invitation_token: str, email: str) -> str:
    """Frontend registration link carrying the token and invited address."""
    query = urlencode({'invitationToken': invitation_token, 'email': email})
    return f"{settings.FRONTEND_BASE_URL.rstrip('/')}/register?{query}"


def send_invitation_email(*, to_email: str, inviter_name: str, invitation_token: str) -> None:
    """
    Render and send one invitation email.

    Raises whatever the mail backend raises (SMTPException, OSError, ...).
    """
    context = {
        'inviter_name': inviter_name,
        'invitation_url': build_invitation_url(invitation_token=invitation_token, email=to_email),
    }
    message = EmailMultiAlternatives(
        subject=INVITATION_SUBJECT,
        body=render_to_string('couples/email/invitation.txt', context),
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[to_email],
    )
    message.attach_alternative(render_to_string('couples/email/invitation.html', context), 'text/html')
    message.send()


def _deliver(to_email, inviter_name, invitation_token):
    try:
        send_invitation_email(
            to_email=to_email,
            inviter_name=inviter_name,
            invitation_token=invitation_token,
        )
    except Exception:
        logger.exception("Failed to send invitation email to %s", to_email)
        return
    logger.info("Invitation email sent to %s", to_email)


def _schedule(to_email, inviter_name, invitation_token):
    if settings.INVITATION_EMAILS_ASYNC:
        _get_executor().submit(_deliver, to_email, inviter_name, invitation_token)
    else:
        _deliver(to_email, inviter_name, invitation_token)


def dispatch_invitation(*, to_email: str, inviter_name: str, invitation_token: str) -> bool:
    """
    Queue an invitation email once the current transaction commits.

    Returns:
        False when no SMTP relay is configured and nothing was queued
    """
    if not settings.INVITATION_EMAILS_ENABLED:
        logger.debug("Invitation emails disabled, not emailing %s", to_email)
        return False

    transaction.on_commit(lambda: _schedule(to_email, inviter_name, invitation_token))
    return True

"""
Contact Management Signals

Django signals for contact-related events.
"""
import logging

from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
from .models import ContactSubmission

logger = logging.getLogger(__name__)


@receiver(post_save, sender=ContactSubmission)
def contact_submission_post_save(sender, instance, created, **kwargs):
    """Audit trail for new submissions."""
    if created:
        logger.info(
            f"Contact submission stored: {instance.id} "
            f"(budget={instance.budget}, tags={instance.tags})"
        )


@receiver(post_delete, sender=ContactSubmission)
def contact_submission_post_delete(sender, instance, **kwargs):
    logger.info(f"Contact submission removed: {instance.id} ({instance.email})")

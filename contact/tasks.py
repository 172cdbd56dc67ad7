"""
Contact Management Email Tasks

Celery tasks for sending contact-related emails. Each task makes a single
delivery attempt; failures are logged and surface as a failed task, never
as a failed API request.
"""
import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from .models import ContactSubmission
from .services.notifications import DispatchFailure

logger = logging.getLogger(__name__)


def _send(subject, text_content, html_content, to, reply_to):
    if settings.DISABLE_EMAIL:
        logger.info(f"Email sending disabled; would send '{subject}' to {to}")
        return False

    email = EmailMultiAlternatives(
        subject=subject,
        body=text_content,
        from_email=settings.CONTACT_EMAIL_FROM,
        to=to,
        reply_to=reply_to,
    )
    email.attach_alternative(html_content, "text/html")
    email.send(fail_silently=False)
    return True


@shared_task(bind=True, max_retries=0)
def send_operator_notification(self, contact_id):
    """
    Notify the site operator about a new contact submission.

    Args:
        contact_id: UUID of the ContactSubmission
    """
    try:
        contact = ContactSubmission.objects.get(id=contact_id)
    except ContactSubmission.DoesNotExist:
        logger.warning(f"Contact submission {contact_id} not found; operator notification skipped")
        return f"Contact submission {contact_id} not found"

    subject = f"New Contact Form Submission: {contact.subject}"
    admin_url = f"{settings.ADMIN_URL}/contacts/{contact.id}"

    text_content = f"""New contact form submission received:

From: {contact.name} ({contact.email})
Company: {contact.company or 'Not provided'}
Phone: {contact.phone or 'Not provided'}
Subject: {contact.subject}
Budget: {contact.budget_display}
Tags: {', '.join(contact.tags) or 'None'}
Received: {contact.created_at.strftime('%Y-%m-%d %H:%M:%S')}

Message:
{contact.message}

---

View and respond: {admin_url}
"""

    html_content = render_to_string('contact/emails/operator_notification.html', {
        'contact': contact,
        'admin_url': admin_url,
        'site_name': settings.SITE_NAME,
    })

    try:
        _send(
            subject,
            text_content,
            html_content,
            to=[settings.CONTACT_EMAIL_TO],
            reply_to=[contact.email],
        )
    except Exception as exc:
        logger.error(f"Operator notification for {contact_id} failed: {exc}", exc_info=True)
        raise DispatchFailure('operator', contact_id, exc) from exc

    logger.info(f"Operator notification sent for contact {contact_id}")
    return f"Operator notification sent for {contact_id}"


@shared_task(bind=True, max_retries=0)
def send_submitter_confirmation(self, contact_id, message=None, subject=None):
    """
    Send the acknowledgment (or an admin response) to the submitter.

    Args:
        contact_id: UUID of the ContactSubmission
        message: Optional body replacing the default acknowledgment
        subject: Optional subject replacing the default one
    """
    try:
        contact = ContactSubmission.objects.get(id=contact_id)
    except ContactSubmission.DoesNotExist:
        logger.warning(f"Contact submission {contact_id} not found; confirmation skipped")
        return f"Contact submission {contact_id} not found"

    site_name = settings.SITE_NAME
    subject = subject or f"Thank you for contacting {site_name}"

    if message:
        body = message
    else:
        body = (
            f"Thank you for reaching out to {site_name}. We have received your message "
            f"regarding \"{contact.subject}\" and will get back to you within 24-48 hours."
        )

    text_content = f"""Dear {contact.name},

{body}

Your inquiry:
Subject: {contact.subject}
Budget: {contact.budget_display}

Best regards,
The {site_name} Team
"""

    html_content = render_to_string('contact/emails/submitter_confirmation.html', {
        'contact': contact,
        'body': body,
        'site_name': site_name,
    })

    try:
        _send(
            subject,
            text_content,
            html_content,
            to=[contact.email],
            reply_to=[settings.CONTACT_EMAIL_REPLY_TO],
        )
    except Exception as exc:
        logger.error(f"Confirmation for {contact_id} failed: {exc}", exc_info=True)
        raise DispatchFailure('confirmation', contact_id, exc) from exc

    logger.info(f"Confirmation sent to {contact.email}")
    return f"Confirmation sent to {contact.email}"

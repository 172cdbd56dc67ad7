"""
Contact Management Models

Database schema for contact form submissions, internal notes and
submission rate limiting.
"""
import uuid
from django.db import models
from django.db.models import Count, Q
from django.utils import timezone

from .services.tag_classifier import classify


BUDGET_DISPLAY = {
    'small': 'Small Project ($5K - $20K)',
    'medium': 'Medium Project ($20K - $100K)',
    'large': 'Large Project ($100K+)',
    'consultation': 'Strategy Consultation',
    'discuss': "Let's Discuss",
}


def budget_display(budget):
    """Human label for a budget value, as shown in e-mails and exports."""
    return BUDGET_DISPLAY.get(budget, 'Not specified')


class ContactSubmissionQuerySet(models.QuerySet):

    def get_stats(self):
        """Counts per status lifecycle stage."""
        stats = self.aggregate(
            total=Count('id'),
            new=Count('id', filter=Q(status='new')),
            inProgress=Count('id', filter=Q(status='in_progress')),
            responded=Count('id', filter=Q(status='responded')),
            closed=Count('id', filter=Q(status='closed')),
        )
        return {key: value or 0 for key, value in stats.items()}


class ContactSubmission(models.Model):
    """
    Inquiry submitted through the public contact form.

    Status lifecycle: new -> in_progress -> responded -> closed. The
    ``responded`` status is only ever reached together with a response
    (see ``mark_responded``).
    """

    BUDGET_CHOICES = [
        ('small', 'Small Project ($5K - $20K)'),
        ('medium', 'Medium Project ($20K - $100K)'),
        ('large', 'Large Project ($100K+)'),
        ('consultation', 'Strategy Consultation'),
        ('discuss', "Let's Discuss"),
    ]

    STATUS_CHOICES = [
        ('new', 'New'),
        ('in_progress', 'In Progress'),
        ('responded', 'Responded'),
        ('closed', 'Closed'),
    ]

    PRIORITY_CHOICES = [
        ('low', 'Low'),
        ('medium', 'Medium'),
        ('high', 'High'),
        ('urgent', 'Urgent'),
    ]

    SOURCE_CHOICES = [
        ('website', 'Website'),
        ('referral', 'Referral'),
        ('social', 'Social'),
        ('direct', 'Direct'),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )

    # Contact Information
    name = models.CharField(max_length=100)

    email = models.EmailField(
        max_length=254,
        help_text="Stored trimmed and lower-cased"
    )

    phone = models.CharField(max_length=20, blank=True, default='')

    company = models.CharField(max_length=100, blank=True, default='')

    # Message Details
    subject = models.CharField(max_length=200)

    message = models.TextField(max_length=2000)

    budget = models.CharField(
        max_length=20,
        choices=BUDGET_CHOICES,
        default='discuss'
    )

    # Workflow
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default='new',
        db_index=True
    )

    priority = models.CharField(
        max_length=10,
        choices=PRIORITY_CHOICES,
        default='medium'
    )

    source = models.CharField(
        max_length=10,
        choices=SOURCE_CHOICES,
        default='website'
    )

    tags = models.JSONField(
        default=list,
        blank=True,
        help_text="Topic labels derived from the message at submission time"
    )

    # Response (one per submission, overwritable)
    response_message = models.TextField(null=True, blank=True)
    responded_by = models.CharField(max_length=100, null=True, blank=True)
    responded_at = models.DateTimeField(null=True, blank=True)

    # Provenance, always captured from the request
    ip_address = models.CharField(max_length=64)

    user_agent = models.TextField()

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ContactSubmissionQuerySet.as_manager()

    class Meta:
        db_table = 'contact_submissions'
        ordering = ['-created_at']
        verbose_name = 'Contact Submission'
        verbose_name_plural = 'Contact Submissions'
        indexes = [
            models.Index(fields=['email'], name='contact_sub_email_idx'),
            models.Index(fields=['priority', 'status'], name='contact_sub_prio_status_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.subject} ({self.status})"

    def save(self, *args, **kwargs):
        if self._state.adding:
            self.tags = classify(self.message)
        super().save(*args, **kwargs)

    @property
    def budget_display(self):
        return budget_display(self.budget)

    @property
    def response(self):
        """The response record, or None if nobody has responded yet."""
        if self.response_message is None:
            return None
        return {
            'message': self.response_message,
            'respondedBy': self.responded_by,
            'respondedAt': self.responded_at,
        }

    def set_response(self, message, responded_by='admin'):
        """Attach a response and move the submission to ``responded``. Does not save."""
        self.response_message = message
        self.responded_by = responded_by
        self.responded_at = timezone.now()
        self.status = 'responded'

    def mark_responded(self, message, responded_by='admin'):
        """Record a response and persist it."""
        self.set_response(message, responded_by)
        self.save()

    def add_note(self, text, author='admin'):
        """Append an internal note and bump ``updated_at``."""
        note = ContactNote.objects.create(contact=self, text=text, author=author)
        self.save(update_fields=['updated_at'])
        return note


class ContactNote(models.Model):
    """
    Internal staff note on a contact submission.

    Notes are append-only and read back in creation order.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    contact = models.ForeignKey(
        ContactSubmission,
        on_delete=models.CASCADE,
        related_name='notes'
    )

    text = models.TextField()

    author = models.CharField(max_length=100, default='admin')

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'contact_notes'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"Note by {self.author} on {self.contact_id}"


class ContactFormRateLimit(models.Model):
    """
    Rate limiting tracker for contact form submissions.

    Prevents spam by tracking submissions per IP and email.
    """

    identifier = models.CharField(
        max_length=255,
        db_index=True,
        help_text="IP address or email"
    )

    identifier_type = models.CharField(
        max_length=10,
        choices=[('ip', 'IP Address'), ('email', 'Email')],
        help_text="Type of identifier"
    )

    count = models.IntegerField(
        default=0,
        help_text="Number of submissions"
    )

    window_start = models.DateTimeField(
        help_text="Start of the rate limit window"
    )

    last_submission = models.DateTimeField(
        auto_now=True,
        help_text="Last submission time"
    )

    class Meta:
        db_table = 'contact_form_rate_limits'
        unique_together = [['identifier', 'identifier_type']]
        verbose_name = 'Contact Form Rate Limit'
        verbose_name_plural = 'Contact Form Rate Limits'

    def __str__(self):
        return f"{self.identifier_type}: {self.identifier} ({self.count} submissions)"

"""
Notification dispatcher for contact submissions.

Hands e-mail work to Celery and returns immediately. Nothing raised while
enqueueing or sending ever reaches the HTTP caller: a failed notification
is logged and the originating write still succeeds.
"""
import logging

logger = logging.getLogger(__name__)


class DispatchFailure(Exception):
    """A notification could not be queued or delivered."""

    def __init__(self, kind, contact_id, cause=None):
        self.kind = kind
        self.contact_id = contact_id
        self.cause = cause
        super().__init__(kind, contact_id, cause)

    def __str__(self):
        return f"{self.kind} notification for contact {self.contact_id} failed: {self.cause}"


class NotificationDispatcher:
    """
    Best-effort e-mail side effects for contact submissions.

    Usage:
        dispatcher = NotificationDispatcher()
        dispatcher.notify_operator(contact)
        dispatcher.confirm_to_submitter(contact)

    The task callables are injectable; by default they are the Celery
    tasks in ``contact.tasks``. With ``enabled=False`` nothing is queued.
    """

    def __init__(self, operator_task=None, confirmation_task=None, enabled=True):
        self.enabled = enabled
        if operator_task is None or confirmation_task is None:
            from contact.tasks import send_operator_notification, send_submitter_confirmation
            operator_task = operator_task or send_operator_notification
            confirmation_task = confirmation_task or send_submitter_confirmation
        self.operator_task = operator_task
        self.confirmation_task = confirmation_task

    def notify_operator(self, contact):
        """Queue the new-submission notification to the site operator."""
        return self._dispatch('operator', self.operator_task, str(contact.pk))

    def confirm_to_submitter(self, contact, override_message=None, subject=None):
        """
        Queue a confirmation e-mail to the person who submitted the form.

        ``override_message``/``subject`` replace the default acknowledgment
        copy, which is how admin responses are delivered.
        """
        return self._dispatch(
            'confirmation',
            self.confirmation_task,
            str(contact.pk),
            message=override_message,
            subject=subject,
        )

    def _dispatch(self, kind, task, contact_id, **kwargs):
        if not self.enabled:
            logger.info(f"Notifications disabled; {kind} notification for contact {contact_id} skipped")
            return False

        try:
            task.delay(contact_id, **kwargs)
        except Exception as exc:
            logger.error(str(DispatchFailure(kind, contact_id, exc)), exc_info=True)
            return False

        logger.info(f"Queued {kind} notification for contact {contact_id}")
        return True

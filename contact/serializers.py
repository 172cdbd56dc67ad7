"""
Contact Management Serializers

Serializers for contact form submissions and admin management.
"""
from rest_framework import serializers

from .models import ContactSubmission, ContactNote


class ContactFormSubmitSerializer(serializers.Serializer):
    """
    Public contact form submission serializer.

    Surrounding whitespace is trimmed on every text field (DRF's default
    ``trim_whitespace``); the email is also lower-cased.
    """

    name = serializers.CharField(
        max_length=100,
        required=True,
        help_text="Name of the person contacting us"
    )

    email = serializers.EmailField(
        max_length=254,
        required=True,
        help_text="Valid email address for follow-up"
    )

    subject = serializers.CharField(
        max_length=200,
        required=True
    )

    message = serializers.CharField(
        max_length=2000,
        required=True,
        help_text="Message content (up to 2000 characters)"
    )

    budget = serializers.ChoiceField(
        choices=ContactSubmission.BUDGET_CHOICES,
        required=False,
        allow_blank=True,
        default='discuss'
    )

    phone = serializers.CharField(
        max_length=20,
        required=False,
        allow_blank=True,
        allow_null=True,
        default=''
    )

    company = serializers.CharField(
        max_length=100,
        required=False,
        allow_blank=True,
        allow_null=True,
        default=''
    )

    def validate_email(self, value):
        return value.strip().lower()

    def validate_budget(self, value):
        return value or 'discuss'

    def validate_phone(self, value):
        return value or ''

    def validate_company(self, value):
        return value or ''

    def create(self, validated_data):
        return ContactSubmission.objects.create(**validated_data)


class ContactNoteSerializer(serializers.ModelSerializer):

    timestamp = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = ContactNote
        fields = ['text', 'author', 'timestamp']


class ContactResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    respondedBy = serializers.CharField()
    respondedAt = serializers.DateTimeField()


class ContactSubmissionSerializer(serializers.ModelSerializer):
    """
    Full representation of a stored submission, used by every endpoint
    that returns a contact.
    """

    budgetDisplay = serializers.CharField(source='budget_display', read_only=True)
    notes = ContactNoteSerializer(many=True, read_only=True)
    response = ContactResponseSerializer(read_only=True, allow_null=True)
    ipAddress = serializers.CharField(source='ip_address', read_only=True)
    userAgent = serializers.CharField(source='user_agent', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = ContactSubmission
        fields = [
            'id', 'name', 'email', 'phone', 'company', 'subject', 'message',
            'budget', 'budgetDisplay', 'status', 'priority', 'source', 'tags',
            'notes', 'response', 'ipAddress', 'userAgent', 'createdAt', 'updatedAt'
        ]


class ContactSummarySerializer(serializers.ModelSerializer):
    """Short form used for the dashboard's recent contacts."""

    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = ContactSubmission
        fields = ['id', 'name', 'email', 'subject', 'status', 'createdAt']


class ContactUpdateSerializer(serializers.Serializer):
    """
    Admin patch. Only the fields present are applied.

    ``notes`` appends one note; ``response`` records a response and moves
    the submission to ``responded``.
    """

    status = serializers.ChoiceField(
        choices=ContactSubmission.STATUS_CHOICES,
        required=False,
        allow_blank=True
    )

    priority = serializers.ChoiceField(
        choices=ContactSubmission.PRIORITY_CHOICES,
        required=False,
        allow_blank=True
    )

    notes = serializers.CharField(required=False, allow_blank=True)

    response = serializers.CharField(required=False, allow_blank=True)

    def validate(self, attrs):
        """A submission may only be marked responded together with a response."""
        if (
            attrs.get('status') == 'responded'
            and not attrs.get('response')
            and (self.instance is None or self.instance.response is None)
        ):
            raise serializers.ValidationError({
                'status': ["Status 'responded' requires a response message."]
            })
        return attrs

    def update(self, instance, validated_data):
        if validated_data.get('status'):
            instance.status = validated_data['status']
        if validated_data.get('priority'):
            instance.priority = validated_data['priority']
        if validated_data.get('response'):
            instance.set_response(validated_data['response'])

        instance.save()

        if validated_data.get('notes'):
            instance.add_note(validated_data['notes'])

        return instance


class ContactRespondSerializer(serializers.Serializer):

    message = serializers.CharField(required=True)

    sendEmail = serializers.BooleanField(required=False, default=True)

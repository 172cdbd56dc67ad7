# Generated manually for the contact submission schema
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ContactSubmission',
            fields=[
                ('id', models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('email', models.EmailField(max_length=254, help_text='Stored trimmed and lower-cased')),
                ('phone', models.CharField(max_length=20, blank=True, default='')),
                ('company', models.CharField(max_length=100, blank=True, default='')),
                ('subject', models.CharField(max_length=200)),
                ('message', models.TextField(max_length=2000)),
                ('budget', models.CharField(max_length=20, default='discuss', choices=[('small', 'Small Project ($5K - $20K)'), ('medium', 'Medium Project ($20K - $100K)'), ('large', 'Large Project ($100K+)'), ('consultation', 'Strategy Consultation'), ('discuss', "Let's Discuss")])),
                ('status', models.CharField(max_length=20, default='new', db_index=True, choices=[('new', 'New'), ('in_progress', 'In Progress'), ('responded', 'Responded'), ('closed', 'Closed')])),
                ('priority', models.CharField(max_length=10, default='medium', choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High'), ('urgent', 'Urgent')])),
                ('source', models.CharField(max_length=10, default='website', choices=[('website', 'Website'), ('referral', 'Referral'), ('social', 'Social'), ('direct', 'Direct')])),
                ('tags', models.JSONField(default=list, blank=True, help_text='Topic labels derived from the message at submission time')),
                ('response_message', models.TextField(null=True, blank=True)),
                ('responded_by', models.CharField(max_length=100, null=True, blank=True)),
                ('responded_at', models.DateTimeField(null=True, blank=True)),
                ('ip_address', models.CharField(max_length=64)),
                ('user_agent', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Contact Submission',
                'verbose_name_plural': 'Contact Submissions',
                'db_table': 'contact_submissions',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='ContactNote',
            fields=[
                ('id', models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ('text', models.TextField()),
                ('author', models.CharField(max_length=100, default='admin')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('contact', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='notes', to='contact.contactsubmission')),
            ],
            options={
                'db_table': 'contact_notes',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='ContactFormRateLimit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('identifier', models.CharField(max_length=255, db_index=True, help_text='IP address or email')),
                ('identifier_type', models.CharField(max_length=10, choices=[('ip', 'IP Address'), ('email', 'Email')], help_text='Type of identifier')),
                ('count', models.IntegerField(default=0, help_text='Number of submissions')),
                ('window_start', models.DateTimeField(help_text='Start of the rate limit window')),
                ('last_submission', models.DateTimeField(auto_now=True, help_text='Last submission time')),
            ],
            options={
                'verbose_name': 'Contact Form Rate Limit',
                'verbose_name_plural': 'Contact Form Rate Limits',
                'db_table': 'contact_form_rate_limits',
                'unique_together': {('identifier', 'identifier_type')},
            },
        ),
        migrations.AddIndex(
            model_name='contactsubmission',
            index=models.Index(fields=['email'], name='contact_sub_email_idx'),
        ),
        migrations.AddIndex(
            model_name='contactsubmission',
            index=models.Index(fields=['priority', 'status'], name='contact_sub_prio_status_idx'),
        ),
    ]

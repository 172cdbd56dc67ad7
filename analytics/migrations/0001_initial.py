# Generated manually for the analytics event schema
from django.db import migrations, models
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='AnalyticsEvent',
            fields=[
                ('id', models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ('event', models.CharField(max_length=100, help_text='e.g. page_view, click')),
                ('page', models.CharField(max_length=500, help_text='Path of the page the event happened on')),
                ('user_agent', models.TextField()),
                ('ip_address', models.CharField(max_length=64)),
                ('referrer', models.CharField(max_length=500, default='direct')),
                ('country', models.CharField(max_length=100, default='Unknown')),
                ('city', models.CharField(max_length=100, default='Unknown')),
                ('device', models.CharField(max_length=10, default='desktop', choices=[('desktop', 'Desktop'), ('mobile', 'Mobile'), ('tablet', 'Tablet')])),
                ('browser', models.CharField(max_length=100, default='Unknown')),
                ('os', models.CharField(max_length=100, default='Unknown')),
                ('screen_resolution', models.CharField(max_length=20, default='Unknown')),
                ('language', models.CharField(max_length=20, default='en')),
                ('session_id', models.CharField(max_length=100, db_index=True)),
                ('user_id', models.CharField(max_length=100, null=True, blank=True)),
                ('metadata', models.JSONField(default=dict, blank=True, help_text='Free-form event properties (JSON object)')),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Analytics Event',
                'verbose_name_plural': 'Analytics Events',
                'db_table': 'analytics_events',
                'ordering': ['-timestamp'],
            },
        ),
        migrations.AddIndex(
            model_name='analyticsevent',
            index=models.Index(fields=['event', '-timestamp'], name='analytics_event_ts_idx'),
        ),
        migrations.AddIndex(
            model_name='analyticsevent',
            index=models.Index(fields=['page', '-timestamp'], name='analytics_page_ts_idx'),
        ),
        migrations.AddIndex(
            model_name='analyticsevent',
            index=models.Index(fields=['ip_address', '-timestamp'], name='analytics_ip_ts_idx'),
        ),
    ]

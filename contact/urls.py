"""
Contact Management URL Configuration

Public contact form endpoint, mounted at ``/api/contact``.
"""
from django.urls import path
from .views import ContactFormSubmitView

app_name = 'contact'

urlpatterns = [
    path('', ContactFormSubmitView.as_view(), name='submit'),
]

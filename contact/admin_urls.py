"""
Contact Management Admin URL Configuration

Mounted under ``/api/admin/``; every view requires the admin token.
"""
from django.urls import path
from .views import (
    ContactListView,
    ContactDetailView,
    ContactRespondView,
)

app_name = 'contact_admin'

urlpatterns = [
    path('contacts', ContactListView.as_view(), name='contact-list'),
    path('contacts/<str:id>', ContactDetailView.as_view(), name='contact-detail'),
    path('contacts/<str:id>/respond', ContactRespondView.as_view(), name='contact-respond'),
]

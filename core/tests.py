"""
Tests for the status endpoints and the admin token permission.
"""
from unittest.mock import MagicMock

import pytest
from rest_framework import status

from core.exceptions import Unauthorized
from core.permissions import HasAdminToken, get_bearer_token


def make_request(authorization=None):
    request = MagicMock()
    request.META = {'HTTP_AUTHORIZATION': authorization} if authorization else {}
    return request


class TestStatusEndpoints:

    def test_health(self, api_client, settings):
        settings.ENVIRONMENT = 'staging'
        response = api_client.get('/health')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'OK'
        assert response.data['environment'] == 'staging'
        assert response.data['uptime'] >= 0

    def test_api_index(self, api_client):
        response = api_client.get('/api')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'Running'
        assert response.data['endpoints']['admin'] == '/api/admin'


class TestHasAdminToken:

    def test_bearer_token_parsing(self):
        assert get_bearer_token(make_request('Bearer abc')) == 'abc'
        assert get_bearer_token(make_request('Token abc')) is None
        assert get_bearer_token(make_request('Bearer ')) is None
        assert get_bearer_token(make_request()) is None

    def test_matching_token(self):
        permission = HasAdminToken(admin_token='s3cret')
        assert permission.has_permission(make_request('Bearer s3cret'), view=None) is True

    @pytest.mark.parametrize('authorization', [None, 'Bearer wrong', 'Basic s3cret'])
    def test_rejected(self, authorization):
        permission = HasAdminToken(admin_token='s3cret')
        with pytest.raises(Unauthorized):
            permission.has_permission(make_request(authorization), view=None)

    def test_empty_secret_rejects_everything(self):
        permission = HasAdminToken(admin_token='')
        with pytest.raises(Unauthorized):
            permission.has_permission(make_request('Bearer '), view=None)

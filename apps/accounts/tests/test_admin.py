"""
Admin display tests for the accounts app.
"""

import warnings

import pytest
from django.contrib.admin.sites import AdminSite

from apps.accounts.admin import UserAdmin
from apps.accounts.models import User


@pytest.fixture
def user_admin():
    return UserAdmin(User, AdminSite())


@pytest.mark.django_db
class TestUserAdmin:

    def test_active_badge(self, user_admin, user):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            badge = user_admin.is_active_badge(user)

        assert 'Active' in badge
        assert '#10b981' in badge

    def test_inactive_badge(self, user_admin, user_inactive):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            badge = user_admin.is_active_badge(user_inactive)

        assert 'Inactive' in badge
        assert '#B85C5C' in badge

    def test_deactivate_skips_superusers(self, user_admin, user, rf):
        admin_user = User.objects.create_superuser(email='root@example.com', password='password123')
        request = rf.post('/admin/accounts/user/')

        with pytest.MonkeyPatch.context() as mp:
            mp.setattr(user_admin, 'message_user', lambda *args, **kwargs: None)
            user_admin.deactivate_users(request, User.objects.all())

        user.refresh_from_db()
        admin_user.refresh_from_db()
        assert user.is_active is False
        assert admin_user.is_active is True

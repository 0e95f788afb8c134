# journal/permissions.py
from rest_framework.permissions import SAFE_METHODS, BasePermission

from . import conf


def is_admin(subject_id) -> bool:
    """The only identity rule: the subject equals the one configured admin id."""
    admin = conf.admin_id()
    return bool(admin) and subject_id == admin


class IsJournalAdminOrReadOnly(BasePermission):
    """Reads are public; anything that writes needs the admin subject header."""
    message = "You must be the admin to write to the journal."

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return is_admin(request.headers.get(conf.subject_header()))

from __future__ import annotations


class UserAccountNotFound(Exception):
    """No user account exists with the given id."""

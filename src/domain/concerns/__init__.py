"""
User Record Behaviors

Mixins layered onto the User entity. They only change in-memory state;
persistence and mail are handled by the use cases.
"""

from .authenticatable import AuthenticatableMixin
from .confirmable import ConfirmableMixin
from .lockable import LockableMixin
from .recoverable import RecoverableMixin
from .trackable import TrackableMixin

__all__ = [
    "AuthenticatableMixin",
    "ConfirmableMixin",
    "LockableMixin",
    "RecoverableMixin",
    "TrackableMixin",
]

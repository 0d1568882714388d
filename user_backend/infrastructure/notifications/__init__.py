"""Outbound email notifications"""

from .email_dispatcher import EmailDispatcher, build_activation_email

__all__ = [
    "EmailDispatcher",
    "build_activation_email",
]

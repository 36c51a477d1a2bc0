"""Use cases específicos de Telegram."""

from .relay_lead_notification import RelayLeadNotificationUseCase, mask_chat_id

__all__ = [
    "RelayLeadNotificationUseCase",
    "mask_chat_id",
]

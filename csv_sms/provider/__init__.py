"""Messaging provider adapters."""

from .twilio_client import MessagingClient, TwilioMessagingClient, create_twilio_client

__all__ = [
    "MessagingClient",
    "TwilioMessagingClient",
    "create_twilio_client",
]

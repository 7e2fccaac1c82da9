from __future__ import annotations

import logging
from typing import Protocol

from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.rest import Client

from ..errors import SendError
from ..models.config_models import Credentials

"""Twilio messaging adapter.

The dispatcher only depends on ``MessagingClient.send``; tests substitute a
fake implementing the same method.
"""

__all__ = [
    "MessagingClient",
    "TwilioMessagingClient",
    "create_twilio_client",
]

logger = logging.getLogger(__name__)


class MessagingClient(Protocol):
    def send(self, to: str, from_: str, body: str) -> str:
        """Send one SMS and return the provider message identifier.

        Raises:
            SendError: provider refused or failed to accept the message
        """
        ...


class TwilioMessagingClient:
    """Send SMS through the Twilio REST API.

    One instance wraps a single ``twilio.rest.Client`` and is shared by all
    worker threads of a dispatch; it holds no per-message state.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def send(self, to: str, from_: str, body: str) -> str:
        try:
            message = self._client.messages.create(body=body, to=to, from_=from_)
        except TwilioRestException as e:
            raise SendError(f"{e.msg} (code={e.code}, status={e.status})", code=e.code, status=e.status) from e
        except TwilioException as e:
            raise SendError(str(e)) from e
        return message.sid


def create_twilio_client(credentials: Credentials) -> TwilioMessagingClient:
    """Default client factory used by the dispatcher."""
    logger.debug(f"creating Twilio client for account {credentials.account_sid}")
    return TwilioMessagingClient(Client(credentials.account_sid, credentials.auth_token))

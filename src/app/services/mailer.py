from abc import ABC, abstractmethod


class MailDeliveryError(Exception):
    """The message could not be handed to the mail transport"""


class IMailer(ABC):
    """Outbound mail interface - application layer"""

    @abstractmethod
    async def send(self, to: str, subject: str, body: str) -> None:
        """
        Deliver a plain-text message.

        Raises:
            MailDeliveryError: delivery failed
        """
        pass

"""Interface for the outbound chat completion call."""

from abc import ABC, abstractmethod

from ..entities.term import ChatRequest


class IChatClient(ABC):
    """Interface for OpenAI-compatible chat completion endpoints."""

    @abstractmethod
    async def post_chat_completion(self, request: ChatRequest) -> str:
        """Send the request and return the reply's message content.

        Args:
            request: Model, messages and response mode to send

        Returns:
            The textual payload at choices[0].message.content

        Raises:
            NetworkFailureError: If the call fails or carries no payload
        """

"""MessageSink interface for outbound delivery.

The transport is outside this package; dialogs only see a sink that accepts
outbound messages.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class OutboundMessage(BaseModel):
    """A single message sent to the user."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Text shown to the user")
    speak: str | None = Field(default=None, description="Optional speech variant")


class MessageSink(ABC):
    """Interface for delivering messages to the user (DIP)."""

    @abstractmethod
    async def send(self, message: OutboundMessage) -> None:
        """Deliver a message to the user."""
        ...


class BufferedMessageSink(MessageSink):
    """Buffers messages for testing or batch delivery."""

    def __init__(self) -> None:
        self.messages: list[OutboundMessage] = []

    async def send(self, message: OutboundMessage) -> None:
        """Append message to buffer."""
        self.messages.append(message)

    @property
    def texts(self) -> list[str]:
        """Text of every buffered message, oldest first."""
        return [message.text for message in self.messages]

    def clear(self) -> None:
        """Clear the message buffer."""
        self.messages.clear()

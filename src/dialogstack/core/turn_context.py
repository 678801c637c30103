"""Per-turn context handed to every dialog hook."""

import logging

from pydantic import BaseModel, Field

from dialogstack.core.constants import DEFAULT_LOCALE
from dialogstack.core.message_sink import MessageSink, OutboundMessage

logger = logging.getLogger(__name__)


class Activity(BaseModel):
    """Inbound user message for one turn."""

    text: str = Field(default="", description="Raw user text")
    locale: str | None = Field(default=None, description="Locale reported by the channel")
    conversation_id: str = Field(default="default", description="Conversation identity")


class TurnContext:
    """Wraps the inbound activity and the outbound sink for a single turn.

    Only the raw text and the locale of the activity are read by dialogs.
    """

    def __init__(
        self,
        activity: Activity,
        sink: MessageSink,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.activity = activity
        self.sink = sink
        self.default_locale = default_locale
        self._sent_count = 0

    @property
    def text(self) -> str:
        return self.activity.text

    @property
    def locale(self) -> str:
        """Locale of the activity, falling back to the configured default."""
        return (self.activity.locale or self.default_locale).lower()

    @property
    def sent_count(self) -> int:
        """Number of messages successfully sent during this turn."""
        return self._sent_count

    @property
    def responded(self) -> bool:
        return self._sent_count > 0

    async def send(self, text: str, speak: str | None = None) -> None:
        """Send a message to the user.

        Errors raised by the sink propagate to the caller untouched.
        """
        await self.sink.send(OutboundMessage(text=text, speak=speak))
        self._sent_count += 1
        logger.debug(
            "Sent message",
            extra={"conversation_id": self.activity.conversation_id, "sent_count": self._sent_count},
        )

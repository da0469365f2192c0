"""Canned stand-in for a text-generation backend."""

from __future__ import annotations

import asyncio
from typing import Optional

GREETING_REPLY = "Hi there! How can I help you today?"
ORDER_REPLY = "I can help with that! Please provide your order number."
HELLO_REPLY = "Hello! What brings you here today?"
PRICING_REPLY = "Our pricing depends on the specific plan. Would you like a breakdown?"


class CannedSuggestionProvider:
    """Return keyword-matched replies after a simulated network delay."""

    def __init__(self, delay_seconds: float = 1.5) -> None:
        self.delay_seconds = delay_seconds

    async def suggest(self, parent_text: Optional[str]) -> str:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return self.reply_for(parent_text)

    @staticmethod
    def reply_for(parent_text: Optional[str]) -> str:
        if not parent_text or not parent_text.strip():
            return GREETING_REPLY

        lowered = parent_text.lower()
        if "order" in lowered:
            return ORDER_REPLY
        if "hello" in lowered or "hi" in lowered:
            return HELLO_REPLY
        if "price" in lowered or "cost" in lowered:
            return PRICING_REPLY
        return f'That\'s interesting. Tell me more about "{parent_text[:20]}..."'


__all__ = ["CannedSuggestionProvider"]

"""Exceptions raised by the gallery pipeline."""
from __future__ import annotations


class FetchError(Exception):
    """The Piwigo web service could not be reached.

    Carries the transport's human-readable messages; there may be more than one.
    """

    def __init__(self, messages: list[str] | str):
        if isinstance(messages, str):
            messages = [messages]
        self.messages: list[str] = [m for m in messages if m] or ["Unknown transport error"]
        super().__init__(", ".join(self.messages))

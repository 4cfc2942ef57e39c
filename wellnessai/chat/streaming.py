"""Word-by-word reveal of an already received reply."""

import asyncio
import random
import re
from collections.abc import AsyncIterator, Awaitable, Callable

from wellnessai.config import StreamPacing

_WORD = re.compile(r"\S+")

SENTENCE_END = (".", "!", "?")
CLAUSE_END = (",", ";", ":")


class SimulatedStream:
    """Async iterator over growing prefixes of ``text``.

    A reply of N words yields exactly N states; the last one is the full
    text. Between states the stream sleeps for a random delay, longer after
    sentence or clause punctuation. ``cancel()`` stops the reveal before the
    next state is produced.

    Args:
        text: The complete reply.
        pacing: Delay bounds and punctuation pauses.
        rng: Random source (seeded in tests).
        sleep: Awaitable sleep function (replaced in tests).
    """

    def __init__(
        self,
        text: str,
        pacing: StreamPacing | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._text = text
        self._pacing = pacing or StreamPacing()
        self._rng = rng or random.Random()
        self._sleep = sleep
        self._ends = [match.end() for match in _WORD.finditer(text)]
        self._revealed = ""
        self._cancelled = False

    @property
    def word_count(self) -> int:
        return len(self._ends)

    @property
    def revealed(self) -> str:
        """Prefix shown so far."""
        return self._revealed

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def _delay_after(self, word: str) -> float:
        delay = self._rng.uniform(self._pacing.min_delay, self._pacing.max_delay)
        if word.endswith(SENTENCE_END):
            delay += self._pacing.sentence_pause
        elif word.endswith(CLAUSE_END):
            delay += self._pacing.clause_pause
        return delay

    async def reveal(self) -> AsyncIterator[str]:
        start = 0
        for index, end in enumerate(self._ends):
            if self._cancelled:
                return
            last = index == len(self._ends) - 1
            self._revealed = self._text if last else self._text[:end]
            yield self._revealed
            if last:
                return
            await self._sleep(self._delay_after(self._text[start:end].strip()))
            start = end

    def __aiter__(self) -> AsyncIterator[str]:
        return self.reveal()

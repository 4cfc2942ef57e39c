"""Unit tests for SimulatedStream word-by-word reveal."""

import random

import pytest_check as check

from wellnessai.chat import SimulatedStream
from wellnessai.config import StreamPacing

PACING = StreamPacing(min_delay=0.01, max_delay=0.01, sentence_pause=0.5, clause_pause=0.2)


class FakeSleep:
    """Records requested delays without waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


async def _collect(stream: SimulatedStream) -> list[str]:
    return [state async for state in stream]


class TestReveal:
    async def test_one_state_per_word(self) -> None:
        stream = SimulatedStream("Drink more water today", PACING, sleep=FakeSleep())

        states = await _collect(stream)

        check.equal(states, ["Drink", "Drink more", "Drink more water", "Drink more water today"])
        check.equal(stream.word_count, 4)

    async def test_last_state_is_full_text(self) -> None:
        """Trailing whitespace and newlines survive in the final state."""
        text = "Line one.\n\n- item  \n"
        states = await _collect(SimulatedStream(text, PACING, sleep=FakeSleep()))

        check.equal(states[-1], text)
        check.equal(len(states), 4)

    async def test_empty_text_yields_nothing(self) -> None:
        assert await _collect(SimulatedStream("   ", PACING, sleep=FakeSleep())) == []

    async def test_punctuation_pauses(self) -> None:
        sleep = FakeSleep()
        await _collect(SimulatedStream("Hi, there. Friend", PACING, sleep=sleep))

        check.equal(len(sleep.delays), 2)
        check.almost_equal(sleep.delays[0], 0.21)
        check.almost_equal(sleep.delays[1], 0.51)

    async def test_random_delay_within_bounds(self) -> None:
        sleep = FakeSleep()
        pacing = StreamPacing(min_delay=0.03, max_delay=0.08, sentence_pause=0, clause_pause=0)
        stream = SimulatedStream("a b c d e f g h", pacing, rng=random.Random(7), sleep=sleep)

        await _collect(stream)

        check.equal(len(sleep.delays), 7)
        check.is_true(all(0.03 <= d <= 0.08 for d in sleep.delays))


class TestCancel:
    async def test_cancel_stops_before_next_state(self) -> None:
        stream = SimulatedStream("one two three four", PACING, sleep=FakeSleep())
        states: list[str] = []

        async for state in stream:
            states.append(state)
            if len(states) == 2:
                stream.cancel()

        check.equal(states, ["one", "one two"])
        check.is_true(stream.cancelled)
        check.equal(stream.revealed, "one two")

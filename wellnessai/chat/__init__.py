"""Chat conversation flow.

Components:
    - SimulatedStream: cancellable word-by-word reveal
    - ChatController: idle/sending/streaming/stopping state machine
"""

from wellnessai.chat.controller import STOP_SUFFIX, ChatController, ChatState
from wellnessai.chat.streaming import SimulatedStream

__all__ = ["STOP_SUFFIX", "ChatController", "ChatState", "SimulatedStream"]

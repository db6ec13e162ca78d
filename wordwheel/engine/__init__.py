"""Game engine - phrase generation, masking and state transitions."""

from .outcomes import Outcome, OutcomeKind
from .phases import GameState
from .phrases import PhraseGenerator
from .round import RoundEngine

__all__ = ["Outcome", "OutcomeKind", "GameState", "PhraseGenerator", "RoundEngine"]

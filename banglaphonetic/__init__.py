from banglaphonetic.engine import EditInstruction, PhoneticEngine
from banglaphonetic.lexicon import Lexicon, default_lexicon
from banglaphonetic.session import SessionBuffer

__all__ = ["EditInstruction", "Lexicon", "PhoneticEngine", "SessionBuffer", "default_lexicon"]

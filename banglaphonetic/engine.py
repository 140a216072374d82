from dataclasses import dataclass

from banglaphonetic.config import get_settings
from banglaphonetic.lexicon import default_lexicon
from banglaphonetic.log import get_logger
from banglaphonetic.session import SessionBuffer

logger = get_logger(__name__)


@dataclass(frozen=True)
class EditInstruction:
    delete_count: int  # committed characters to remove before the cursor
    insert_text: str   # text to insert at the cursor afterwards

    def apply(self, text):
        """Applies the edit to text whose end is the cursor"""
        if self.delete_count:
            text = text[:max(len(text) - self.delete_count, 0)]
        return text + self.insert_text


class PhoneticEngine():
    def __init__(self, lexicon=None, settings=None):
        if lexicon is None:
            lexicon = default_lexicon()
        if settings is None:
            settings = get_settings()
        if settings.MAX_BUFFER_LENGTH < lexicon.max_token_length:
            raise ValueError(
                "MAX_BUFFER_LENGTH (%d) is shorter than the longest lexicon "
                "token (%d)" % (settings.MAX_BUFFER_LENGTH, lexicon.max_token_length))
        self.lexicon = lexicon
        self.settings = settings
        self.buffer = SessionBuffer(max_length=settings.MAX_BUFFER_LENGTH)

    @classmethod
    def transliterate(cls, text, **kwargs):
        """Transliterates a whole string as if typed in phonetic mode

        Usage:

        ::
        from banglaphonetic import PhoneticEngine
        PhoneticEngine.transliterate("bhalo")

        """
        # imported here, the keyboard module depends on this one
        from banglaphonetic.keyboard import InputMode, PhoneticKeyboard
        keyboard = PhoneticKeyboard(engine=cls(**kwargs), mode=InputMode.PHONETIC)
        keyboard.type_text(text)
        return keyboard.field.text

    def process(self, char):
        """Processes one keystroke and returns the edit to perform

        The keystroke is appended to the session buffer, then the longest
        trailing substring of the buffer found in the lexicon wins. A match
        of length L replaces the L - 1 characters committed for the earlier
        keystrokes of that match. If nothing matches, the character is
        passed through as is.

        """
        # start of buffer, checked before the append
        word_initial = not self.buffer
        self.buffer.append(char)
        buffer_str = self.buffer.snapshot()

        if word_initial and self.settings.STANDALONE_VOWELS:
            vowel = self.lexicon.standalone_vowel(char)
            if vowel is not None:
                return EditInstruction(0, vowel)

        # tokens longer than the lexicon's longest can never match
        longest = min(len(buffer_str), self.lexicon.max_token_length)
        for length in range(longest, 0, -1):
            replaced = self.lexicon.lookup(buffer_str[-length:])
            if replaced is not None:
                return EditInstruction(length - 1, replaced)

        return EditInstruction(0, char)

    def reset(self):
        self.buffer.reset()
        logger.debug("Session reset")

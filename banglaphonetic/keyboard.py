"""
Reference host for the phonetic engine.

Routes keys the way the on-screen keyboard does and applies the engine's
edits to an in-memory text field. Platform services (click sound, haptics,
speech recognition, toasts) are abstract capabilities the real host
implements.
"""

from abc import ABC, abstractmethod
from enum import Enum

from banglaphonetic.engine import PhoneticEngine
from banglaphonetic.log import get_logger

logger = get_logger(__name__)

# Characters that are routed through the engine even though they are not letters
PHONETIC_SYMBOLS = ":^"

VOICE_UNAVAILABLE = "Voice recognition not supported on this device"
VOICE_LISTENING = "Listening..."
VOICE_FAILED = "Voice input failed"


class InputMode(Enum):
    ENGLISH = "EN"
    BANGLA = "BN"
    PHONETIC = "AVRO"

    def next(self):
        modes = list(InputMode)
        return modes[(modes.index(self) + 1) % len(modes)]


class VoiceInputError(Exception):
    """Raised by a VoiceInput when recognition fails."""


class Feedback(ABC):
    @abstractmethod
    def key_click(self):
        ...

    @abstractmethod
    def notify(self, message):
        ...


class SilentFeedback(Feedback):
    def key_click(self):
        pass

    def notify(self, message):
        logger.info(message)


class VoiceInput(ABC):
    """Speech recogniser.

    Recognition runs asynchronously: start_listening returns at once and the
    recogniser later calls the keyboard's on_voice_result, on_voice_error or
    on_end_of_speech.
    """

    @abstractmethod
    def is_available(self):
        ...

    @abstractmethod
    def start_listening(self, language):
        ...


class NoVoiceInput(VoiceInput):
    def is_available(self):
        return False

    def start_listening(self, language):
        raise VoiceInputError("no recogniser")


class TextField:
    """Committed text with a cursor, initially at the end."""

    def __init__(self, text=""):
        self._text = text
        self._cursor = len(text)

    @property
    def text(self):
        return self._text

    @property
    def cursor(self):
        return self._cursor

    def commit(self, text):
        self._text = self._text[:self._cursor] + text + self._text[self._cursor:]
        self._cursor += len(text)

    def delete_before(self, count):
        start = max(self._cursor - count, 0)
        self._text = self._text[:start] + self._text[self._cursor:]
        self._cursor = start

    def apply(self, instruction):
        before = instruction.apply(self._text[:self._cursor])
        self._text = before + self._text[self._cursor:]
        self._cursor = len(before)

    def move_cursor(self, offset):
        self._cursor = min(max(self._cursor + offset, 0), len(self._text))


class PhoneticKeyboard:
    def __init__(self, engine=None, field=None, feedback=None, voice=None,
                 mode=InputMode.ENGLISH):
        self.engine = engine if engine is not None else PhoneticEngine()
        self.field = field if field is not None else TextField()
        self.feedback = feedback if feedback is not None else SilentFeedback()
        self.voice = voice if voice is not None else NoVoiceInput()
        self.mode = mode
        self.caps = False
        self.symbols = False
        self.listening = False

    @property
    def layout(self):
        if self.symbols:
            return "symbols"
        # phonetic typing uses the English layout
        return "bangla" if self.mode is InputMode.BANGLA else "qwerty"

    def start_input(self):
        """A new text field gained focus."""
        self.engine.reset()

    def press(self, char):
        self.feedback.key_click()

        if self.mode is not InputMode.PHONETIC:
            self.field.commit(self._shifted(char))
            return

        if char.isalpha():
            self.field.apply(self.engine.process(self._shifted(char)))
        elif char in PHONETIC_SYMBOLS:
            self.field.apply(self.engine.process(char))
        else:
            # literal text breaks adjacency with the buffered keystrokes
            self.field.commit(char)
            self.engine.reset()

    def press_delete(self):
        self.feedback.key_click()
        self.engine.reset()
        self.field.delete_before(1)

    def press_enter(self):
        self.feedback.key_click()
        self.engine.reset()
        self.field.commit("\n")

    def press_done(self):
        """The action key sends enter to the field."""
        self.press_enter()

    def move_cursor_left(self):
        # volume up
        self.engine.reset()
        self.field.move_cursor(-1)

    def move_cursor_right(self):
        # volume down
        self.engine.reset()
        self.field.move_cursor(1)

    def toggle_shift(self):
        self.feedback.key_click()
        self.caps = not self.caps

    def toggle_symbols(self):
        self.feedback.key_click()
        self.symbols = not self.symbols

    def switch_mode(self):
        self.feedback.key_click()
        self.mode = self.mode.next()
        self.symbols = False
        self.engine.reset()
        logger.debug("Input mode switched to %s", self.mode.value)
        self.feedback.notify(self.mode.value)
        return self.mode

    def start_voice_input(self):
        if not self.voice.is_available():
            self.feedback.notify(VOICE_UNAVAILABLE)
            return False
        if self.listening:
            return False

        language = "bn-BD" if self.mode is InputMode.BANGLA else "en-US"
        try:
            self.voice.start_listening(language)
        except VoiceInputError as e:
            logger.warning("Voice input failed to start: %s", e)
            self.feedback.notify(VOICE_FAILED)
            return False

        self.listening = True
        self.feedback.notify(VOICE_LISTENING)
        return True

    def on_voice_result(self, text):
        self.listening = False
        if text:
            self.field.commit(text + " ")
            self.engine.reset()

    def on_voice_error(self, error):
        self.listening = False
        logger.warning("Voice input failed: %s", error)

    def on_end_of_speech(self):
        self.listening = False

    def type_text(self, text):
        for char in text:
            if char == "\n":
                self.press_enter()
            elif char == "\b":
                self.press_delete()
            else:
                self.press(char)

    def _shifted(self, char):
        if self.caps and char.isalpha():
            return char.upper()
        return char

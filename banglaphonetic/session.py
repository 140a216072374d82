from banglaphonetic.log import get_logger

logger = get_logger(__name__)


class SessionBuffer():
    """Raw Latin keystrokes received since the last reset

    The buffer keeps at most max_length characters; when an append
    overflows it the oldest characters are dropped.

    """

    def __init__(self, max_length=64):
        if max_length < 1:
            raise ValueError("max_length must be positive, got %r" % max_length)
        self.max_length = max_length
        self._chars = []

    def __len__(self):
        return len(self._chars)

    def __bool__(self):
        return bool(self._chars)

    def __repr__(self):
        return "SessionBuffer(%r)" % self.snapshot()

    def append(self, char):
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("Expected a single character, got %r" % (char,))
        self._chars.append(char)
        overflow = len(self._chars) - self.max_length
        if overflow > 0:
            del self._chars[:overflow]
            logger.debug("Session buffer trimmed by %d characters", overflow)

    def snapshot(self):
        return ''.join(self._chars)

    def reset(self):
        self._chars = []

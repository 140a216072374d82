from functools import lru_cache
from types import MappingProxyType


class Lexicon():
    def __init__(self, patterns=None, standalone_vowels=None):
        self.init_data()
        if patterns is None:
            patterns = self.data['PATTERNS']
        if standalone_vowels is None:
            standalone_vowels = self.data['STANDALONE_VOWELS']

        table = {}
        for pattern in patterns:
            if pattern['find'] in table:
                raise ValueError("Duplicate lexicon token: %r" % pattern['find'])
            table[pattern['find']] = pattern['replace']
        # read-only views, the lexicon is shared between sessions
        self.PATTERNS = MappingProxyType(table)
        self.STANDALONE_VOWELS = MappingProxyType(dict(standalone_vowels))
        del self.data
        self.max_token_length = max([len(find) for find in self.PATTERNS] or [0])

    def __contains__(self, token):
        return token in self.PATTERNS

    def __len__(self):
        return len(self.PATTERNS)

    def __iter__(self):
        return iter(self.PATTERNS)

    def lookup(self, token):
        """Returns the Bangla replacement for a romanized token

        Tokens are case-sensitive ("n" and "N" are different entries).
        Returns None if the token has no entry.

        """
        return self.PATTERNS.get(token)

    def standalone_vowel(self, char):
        """Returns the independent vowel letter for char, or None"""
        return self.STANDALONE_VOWELS.get(char)

    def items(self):
        return self.PATTERNS.items()

    def init_data(self):
        self.data = {
            "PATTERNS": [
                # Kar forms
                {
                    "find": "a",
                    "replace": "া"
                },
                {
                    "find": "o",
                    "replace": "অ"
                },
                {
                    "find": "i",
                    "replace": "ি"
                },
                {
                    "find": "I",
                    "replace": "ী"
                },
                {
                    "find": "u",
                    "replace": "ু"
                },
                {
                    "find": "U",
                    "replace": "ূ"
                },
                {
                    "find": "e",
                    "replace": "ে"
                },
                {
                    "find": "O",
                    "replace": "ো"
                },
                # Consonants
                {
                    "find": "k",
                    "replace": "ক"
                },
                {
                    "find": "kh",
                    "replace": "খ"
                },
                {
                    "find": "g",
                    "replace": "গ"
                },
                {
                    "find": "gh",
                    "replace": "ঘ"
                },
                {
                    "find": "N",
                    "replace": "ঙ"
                },
                {
                    "find": "c",
                    "replace": "চ"
                },
                {
                    "find": "ch",
                    "replace": "ছ"
                },
                {
                    "find": "j",
                    "replace": "জ"
                },
                {
                    "find": "jh",
                    "replace": "ঝ"
                },
                {
                    "find": "T",
                    "replace": "ট"
                },
                {
                    "find": "Th",
                    "replace": "ঠ"
                },
                {
                    "find": "D",
                    "replace": "ড"
                },
                {
                    "find": "Dh",
                    "replace": "ঢ"
                },
                {
                    "find": "t",
                    "replace": "ত"
                },
                {
                    "find": "th",
                    "replace": "থ"
                },
                {
                    "find": "d",
                    "replace": "দ"
                },
                {
                    "find": "dh",
                    "replace": "ধ"
                },
                {
                    "find": "n",
                    "replace": "ন"
                },
                {
                    "find": "p",
                    "replace": "প"
                },
                {
                    "find": "f",
                    "replace": "ফ"
                },
                {
                    "find": "b",
                    "replace": "ব"
                },
                {
                    "find": "bh",
                    "replace": "ভ"
                },
                {
                    "find": "m",
                    "replace": "ম"
                },
                {
                    "find": "z",
                    "replace": "য"
                },
                {
                    "find": "r",
                    "replace": "র"
                },
                {
                    "find": "l",
                    "replace": "ল"
                },
                {
                    "find": "sh",
                    "replace": "শ"
                },
                {
                    "find": "S",
                    "replace": "ষ"
                },
                {
                    "find": "s",
                    "replace": "স"
                },
                {
                    "find": "h",
                    "replace": "হ"
                },
                # Precomposed nukta forms, one code point each
                {
                    "find": "R",
                    "replace": "ড়"
                },
                {
                    "find": "Rh",
                    "replace": "ঢ়"
                },
                {
                    "find": "y",
                    "replace": "য়"
                },
                # Conjuncts and signs
                {
                    "find": "kkh",
                    "replace": "ক্ষ"
                },
                {
                    "find": "ng",
                    "replace": "ং"
                },
                {
                    "find": ":",
                    "replace": "ঃ"
                },
                {
                    "find": "^",
                    "replace": "ঁ"
                }
            ],
            "STANDALONE_VOWELS": {
                "a": "আ",
                "i": "ই",
                "I": "ঈ",
                "u": "উ"
            }
        }


@lru_cache()
def default_lexicon():
    """Shared read-only lexicon built on first use"""
    return Lexicon()

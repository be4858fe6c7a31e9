import random
import string
import sys
from enum import Enum

from wordlists import ABSTRACT_WORDS, UK_LOCATIONS, WORLDWIDE_LOCATIONS

MAX_ATTEMPTS = 50
FALLBACK_LENGTH = 4


class InvalidConfiguration(ValueError):
    pass


class DegenerateWordError(ValueError):
    pass


class CapitaliseMode(str, Enum):
    NONE = 'none'
    ONE = 'one'
    SOME = 'some'


class WordlistMode(str, Enum):
    ALL = 'all'
    ABSTRACT_ONLY = 'abstract_words_only'
    ONLY_UK = 'uk_only'
    ONLY_WORLDWIDE = 'worldwide_only'
    ALL_LOCATIONS = 'all_locations'
    NOT_ABSTRACT = 'not_abstract'


class Wordlist(Enum):
    ABSTRACT = 0
    UK = 1
    WORLDWIDE = 2


WORDLISTS = {
    Wordlist.ABSTRACT: ABSTRACT_WORDS,
    Wordlist.UK: UK_LOCATIONS,
    Wordlist.WORLDWIDE: WORLDWIDE_LOCATIONS,
}


def _coerce(enumtype, value):
    """
    Turn a mode given as enum member or its string value into the enum
    """
    try:
        return enumtype(value)
    except ValueError as e:
        choices = ', '.join(m.value for m in enumtype)
        raise InvalidConfiguration(
            f"{enumtype.__name__} not recognised: {value!r} (choose from {choices})") from e


def _check_digits(num_digits):
    if isinstance(num_digits, bool) or not isinstance(num_digits, int) or num_digits < 0:
        raise InvalidConfiguration(f"numdigits must be a non-negative integer, got {num_digits!r}")
    return num_digits


def capitalise(word, mode, rng):
    """
    Capitalise word according to mode
        none -- unchanged
        one  -- exactly one random character uppercased
        some -- each character uppercased with a chance of 1 in 4
    """
    match mode:
        case CapitaliseMode.NONE:
            return word
        case CapitaliseMode.ONE:
            chars = list(word)
            if chars:
                pos = rng.randint(0, len(chars) - 1)
                chars[pos] = chars[pos].upper()
            return ''.join(chars)
        case CapitaliseMode.SOME:
            return ''.join(c.upper() if rng.randint(0, 3) == 0 else c for c in word)
        case _:
            raise InvalidConfiguration(f"Capitalise mode not recognised: {mode!r}")


def numeric_token(num_digits, rng):
    """
    Fixed width string of digits, 0s and 1s replaced to avoid confusion
    with O, l and I
    """
    _check_digits(num_digits)
    if num_digits == 0:
        return ''
    number = rng.randint(0, 10 ** num_digits - 1)
    padded = f"{number:0{num_digits}d}"
    #   padding zeros are replaced too
    return ''.join(str(rng.randint(2, 9)) if c in '01' else c for c in padded)


class MemorablePassword:
    """
    Password made of one word with a number spliced into it, eg 'ab725le'

    Word lists and the random source may be replaced, mostly for tests:
        wordlists   mapping of Wordlist -> sequence of words, merged over
                    the built-in lists
        rng         random.Random compatible object, not meant for key
                    material
    """
    def __init__(self, num_digits=3, capitalise_mode=CapitaliseMode.NONE,
                 wordlist_mode=WordlistMode.ABSTRACT_ONLY,
                 rng=None, wordlists=None, verbose=False):
        self.num_digits = _check_digits(num_digits)
        self.capitalise_mode = _coerce(CapitaliseMode, capitalise_mode)
        self.wordlist_mode = _coerce(WordlistMode, wordlist_mode)
        self.rng = rng if rng is not None else random.Random()
        self.wordlists = {**WORDLISTS, **(wordlists or {})}
        self.verbose = verbose

    def __repr__(self):
        return (f"<MemorablePassword: digits={self.num_digits} "
                f"capitalise={self.capitalise_mode.value} wordlist={self.wordlist_mode.value}>")

    def _log(self, message):
        if self.verbose:
            print(f"  {message}", file=sys.stderr)

    def set_num_digits(self, num_digits):
        self.num_digits = _check_digits(num_digits)

    def set_capitalise_mode(self, capitalise_mode):
        self.capitalise_mode = _coerce(CapitaliseMode, capitalise_mode)

    def set_wordlist_mode(self, wordlist_mode):
        self.wordlist_mode = _coerce(WordlistMode, wordlist_mode)

    def resolve_wordlist(self):
        """
        Pick which word list to draw from for the current wordlist mode
        """
        locations = (Wordlist.UK, Wordlist.WORLDWIDE)
        match self.wordlist_mode:
            case WordlistMode.ABSTRACT_ONLY:
                return Wordlist.ABSTRACT
            case WordlistMode.ALL:
                #   weight towards abstract words
                return Wordlist.ABSTRACT if self.rng.randint(0, 1) else self.rng.choice(locations)
            case WordlistMode.ALL_LOCATIONS | WordlistMode.NOT_ABSTRACT:
                return self.rng.choice(locations)
            case WordlistMode.ONLY_UK:
                return Wordlist.UK
            case WordlistMode.ONLY_WORLDWIDE:
                return Wordlist.WORLDWIDE
            case _:
                raise InvalidConfiguration(f"Wordlist mode not recognised: {self.wordlist_mode!r}")

    def get_word(self, character_limit=None):
        """
        Return a single capitalised word, also used on its own for building
        passwords elsewhere
            character_limit     longest acceptable word, None or 0 for no limit
        A 4 letter random word is made up if no word fits in 50 draws.
        """
        if character_limit is not None and character_limit < 0:
            raise InvalidConfiguration(f"character limit must not be negative, got {character_limit!r}")
        wordlist = self.resolve_wordlist()
        words = self.wordlists[wordlist]
        self._log(f"wordlist: {wordlist.name} ({len(words)} words)")
        for _ in range(MAX_ATTEMPTS):
            word = self.rng.choice(words)
            if not character_limit or len(word) <= character_limit:
                return capitalise(word, self.capitalise_mode, self.rng)
        #   none found so create random string
        word = ''.join(self.rng.choice(string.ascii_lowercase) for i in range(FALLBACK_LENGTH))
        self._log(f"no word within {character_limit} characters, using fallback")
        return capitalise(word, self.capitalise_mode, self.rng)

    def generate(self):
        """
        Get a password according to the current rules
        """
        word = self.get_word()
        chars = list(word)
        if len(chars) < 2:
            raise DegenerateWordError(f"cannot insert digits into one character word {word!r}")
        number = numeric_token(self.num_digits, self.rng)
        pos = self.rng.randint(1, len(chars) - 1)
        self._log(f"word: {word}, number: {number}, position: {pos}")
        return ''.join(chars[:pos]) + number + ''.join(chars[pos:])


def memorablestyle(numdigits=3, capitalise='none', wordlist='abstract_words_only'):
    """
    Generate one memorable password, eg 'bri846dge'
    """
    return MemorablePassword(numdigits, capitalise, wordlist).generate()


def demo():
    """
    demo/test
    """
    numpasswords = 5

    for mode in CapitaliseMode:
        print(f"\n\n-----  Memorable passwords with capitalise mode '{mode.value}' -----")
        for i in range(numpasswords):
            print(f"password[{i:2}]: {memorablestyle(3, mode)}")

    for mode in WordlistMode:
        print(f"\n\n----- Memorable passwords from wordlist mode '{mode.value}' -----")
        for i in range(numpasswords):
            print(f"password[{i:2}]: {memorablestyle(3, 'one', mode)}")


if __name__ == "__main__":
    demo()

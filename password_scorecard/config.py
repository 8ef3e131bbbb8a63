"""
Scoring configuration and bundled reference data.

Everything here is read-only once built. The default configuration mirrors the
weights and corpora the scorecard ships with; callers may build their own
ScoringConfig (e.g. with a larger word list) and hand it to a Scorecard.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from re import Pattern
from typing import Iterable, Tuple


# ----------------------------
# Ordered alphabets used by the sequence matcher (and the entropy estimate)
# ----------------------------
LETTER_SEQUENCE = "abcdefghijklmnopqrstuvwxyz"
DIGIT_SEQUENCE = "0123456789"
SYMBOL_SEQUENCE = "~!@#$%^&*()_+{}\\:\"<>?-=[]|;',./"


# ----------------------------
# Keyboard corpus, in order:
#   US horizontal  qwertyuiopasdfghjklzxcvbnm
#   US diagonal    1qaz2wsx3edc4rfv5tgb6yhn7ujm8ik,9ol.0p;/-[=]
#   DE horizontal  rtzuiklyxc!"§$%&/()=  (only the runs that differ from US)
#   DE diagonal    1qay2wb6zhn.0pö-üä+#  (idem)
# ----------------------------
KEYBOARD_CORPUS = (
    "qwertyuiopasdfghjklzxcvbnm"
    "1qaz2wsx3edc4rfv5tgb6yhn7ujm8ik,9ol.0p;/-[=]"
    "rtzuiklyxc!\"§$%&/()="
    "1qay2wb6zhn.0pö-üä+#"
)

# Matches between 1800 and 2299
YEAR_PATTERN = r"1[89][0-9][0-9]|2[0-2][0-9][0-9]"


# ----------------------------
# Common words / passwords. Obfuscated spellings are literal entries ('#' is
# a real character here, not a wildcard). Order matters: the first entry that
# matches at a position wins.
# ----------------------------
COMMON_WORDS: Tuple[str, ...] = tuple("""
911 314159 27182
a#shole access action albert alex amanda amateur andre angel animal anthony
apollo apple arsenal arthur ashley august austin baby bailey ball banana barney
batman beach bear beaver beavis beer bill birdie bitch bite bl#w black blazer
blonde blow blue bond007 bonnie boob booger boom booty boston boy brand braves
brazil brian bronco bubba buddy bust butt c#ck c#m c#nt calvin camaro canada
captain carlos carter casper charl cheese chelsea chester chevy chicago chicken
chris cocacola coffee college comp cookie cool cooper corvette cow cream
crystal daddy dakota dallas daniel dave david debbie dennis diablo diamond dick
dirty doctor dog dolphin donald dragon dreams driver eagle edward einstein
enjoy enter eric erotic ever extreme f#ck falcon fender ferrari fire fish
florida flower flyers ford forever frank fred freedom gandalf gateway gators
gemini george giants ginger girl gold golf gordon great green gregory guitar
gunner hammer hannah happy hardcore harley heather hell helpme hentai hockey
hooters horn house hunt iceman internet jack jaguar jake james japan jasmine
jason jasper jenn jeremy jessica john jordan joseph joshua juice junior justin
kelly kevin killer king kitty knight ladies lakers lauren leather legend
letmein little london love lucky maddog madison maggie magic magnum marine
mark marlboro martin marvin master matrix matt maverick max melissa member merc
merlin mich mick midnight mike miller mine mistress money monica monkey monster
morgan mother mountain movie muff murphy music mustang naked nascar nathan
naught newyork nicholas nicole nipple oliver orange p#ss pa#s pa#sword packers
pant paris parker patrick paul peach peanut penis pepper peter phantom phoenix
player please pookie porn porsche power prince private purple rabbit rachel
racing raid rainbow ranger rebecca red richard rob rock rosebud run rush russia
sam sandra saturn scooby scoot scorpio scott secret sex shadow shannon shaved
shit sierra silver skip slayer slut smith smoke snoop soccer sophie spank spark
spider squirt srinivas star steelers steve sticky stupid success suckit summer
sunshine super surfer swim sydney taylor teens tennis teresa test the thomas
thunder thx tiffany tiger tigger time tits tom topgun toyota travis trouble
trust tucker turtle united vagina victor victoria video viking viper voodoo
voyager walter want warrior welcome what white will wilson winner winston
winter wizard wolf women xavier yamaha yank yellow young
""".split())


def _compile_words(words: Iterable[str]) -> Pattern[str] | None:
    alternatives = [re.escape(w) for w in words if w]
    if not alternatives:
        return None
    return re.compile("|".join(alternatives), re.IGNORECASE)


@dataclass(frozen=True)
class ScoringConfig:
    """
    Immutable knobs for one Scorecard.

    match_length is the window size shared by the sequence, mirror/repeat and
    keyboard detectors. The *_min_length fields gate the year and dictionary
    matchers.
    """

    match_length: int = 3
    adjustment_factor: float = 0.9
    year_min_length: int = 4
    word_min_length: int = 6
    letter_sequence: str = LETTER_SEQUENCE
    digit_sequence: str = DIGIT_SEQUENCE
    symbol_sequence: str = SYMBOL_SEQUENCE
    keyboard_corpus: str = KEYBOARD_CORPUS
    year_pattern: str = YEAR_PATTERN
    common_words: Tuple[str, ...] = COMMON_WORDS
    # Ordered, mutually exclusive classification tests for a single character
    lowercase_pattern: str = r"[a-z]"
    uppercase_pattern: str = r"[A-Z]"
    digit_pattern: str = r"[0-9]"
    symbol_pattern: str = r"[^0-9a-zA-Z]"

    _year_regex: Pattern[str] = field(init=False, repr=False, compare=False)
    _word_regex: Pattern[str] | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.match_length < 1:
            raise ValueError("match_length must be at least 1")
        if self.adjustment_factor <= 0:
            raise ValueError("adjustment_factor must be positive")

        # Frozen dataclass: compiled patterns are cached via object.__setattr__
        object.__setattr__(self, "_year_regex", re.compile(self.year_pattern))
        object.__setattr__(self, "_word_regex", _compile_words(self.common_words))

    @property
    def year_regex(self) -> Pattern[str]:
        return self._year_regex

    @property
    def word_regex(self) -> Pattern[str] | None:
        return self._word_regex

    def with_words(self, words: Iterable[str]) -> "ScoringConfig":
        """Return a copy of this config using a different common-word list."""
        return replace(self, common_words=tuple(words))

    def describe(self) -> str:
        parts = [
            "Scoring configuration",
            f"- match length: {self.match_length}",
            f"- score adjustment factor: {self.adjustment_factor}",
            f"- year patterns checked from length {self.year_min_length}",
            f"- common words checked from length {self.word_min_length}",
            f"- common words loaded: {len(self.common_words)}",
            f"- keyboard corpus length: {len(self.keyboard_corpus)}",
            f"- symbol sequence: {self.symbol_sequence}",
        ]
        return "\n".join(parts)


DEFAULT_CONFIG = ScoringConfig()


def load_word_list(path: str) -> Tuple[str, ...]:
    """
    Read a newline-delimited word list.

    Blank lines and lines starting with '#' are skipped, so obfuscated entries
    need something before the '#' (e.g. 'pa#sword' is fine).
    """
    words = []
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            word = line.strip()
            if not word or word.startswith("#"):
                continue
            words.append(word)
    return tuple(words)

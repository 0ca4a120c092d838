"""English number words to decimal digit strings.

The integer part of a worded number is parsed as a sequence of three-digit
groups (triplets), most significant first, bounded by the magnitude words
"million" and "thousand". Each triplet always contributes exactly three
digits, so ``"twelve"`` converts to ``"012"`` and ``"one thousand"`` to
``"001000"``. An optional decimal part follows the word "point" and is read
digit by digit.

INVARIANT: :func:`convert_worded_number` never raises. Unrecognized words
leave their digit at zero and unrecognized group shapes become ``000``.
Callers that need strict validation check :func:`is_number_phrase` first.
"""

from __future__ import annotations

ONES: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}
TEENS: dict[str, int] = {
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}
TENS: dict[str, int] = {
    "twenty": 2,
    "thirty": 3,
    "forty": 4,
    "fifty": 5,
    "sixty": 6,
    "seventy": 7,
    "eighty": 8,
    "ninety": 9,
}
ZEROS = frozenset({"zero", "oh"})

HUNDRED = "hundred"
THOUSAND = "thousand"
MILLION = "million"
POINT = "point"
FILLER = "and"

_DIGIT_WORDS = frozenset({*ONES, *TEENS, *TENS, *ZEROS})
_VOCABULARY = _DIGIT_WORDS | {HUNDRED, THOUSAND, MILLION, POINT, FILLER}

_ORDINAL_SUFFIXES = ("th", "st", "nd", "rd", "th", "th", "th", "th", "th", "th")

Triplet = tuple[int, int, int]


def _tokenize(text: str) -> list[str]:
    return text.lower().replace("-", " ").split()


def _tail(word: str) -> tuple[int, int]:
    """Return ``(tens, ones)`` for a single word closing a triplet."""
    if word in ONES:
        return 0, ONES[word]
    if word in TEENS:
        return 1, TEENS[word] - 10
    if word in TENS:
        return TENS[word], 0
    return 0, 0


def parse_triplet(group: str) -> Triplet:
    """Parse one magnitude group into ``(hundreds, tens, ones)``.

    The group shape is chosen by token count after dropping "and" fillers:

    * ``"seven"``, ``"twelve"``, ``"forty"``: a single tail word
    * ``"three hundred"``: hundreds only
    * ``"forty two"``: tens and ones
    * ``"three hundred twelve"``: hundreds and a tail word
    * ``"three hundred forty two"``: hundreds, tens and ones

    Any other shape yields ``(0, 0, 0)``.

    Examples:
        >>> parse_triplet("one hundred and five")
        (1, 0, 5)
        >>> parse_triplet("twelve")
        (0, 1, 2)
    """
    tokens = [token for token in _tokenize(group) if token != FILLER]
    count = len(tokens)

    if count == 1:
        return (0, *_tail(tokens[0]))
    if count == 2:
        first, second = tokens
        if second == HUNDRED:
            return ONES.get(first, 0), 0, 0
        return 0, TENS.get(first, 0), ONES.get(second, 0)
    if count == 3:
        return (ONES.get(tokens[0], 0), *_tail(tokens[2]))
    if count == 4:
        return ONES.get(tokens[0], 0), TENS.get(tokens[2], 0), ONES.get(tokens[3], 0)
    return 0, 0, 0


def _integer_digits(text: str) -> str:
    digits: list[str] = []
    for index, million_group in enumerate(text.split(MILLION)):
        groups = million_group.split(THOUSAND)
        # Below the first million, a missing "thousand" still owns a triplet.
        if index > 0 and len(groups) == 1:
            groups.insert(0, "")
        for group in groups:
            digits.extend(str(digit) for digit in parse_triplet(group))
    return "".join(digits)


def _decimal_digits(text: str) -> str:
    digits: list[str] = []
    for token in _tokenize(text):
        if token in ZEROS:
            digits.append("0")
        elif token in ONES:
            digits.append(str(ONES[token]))
    return "".join(digits)


def convert_worded_number(words: str) -> str:
    """Convert an English worded number into a decimal digit string.

    Examples:
        >>> convert_worded_number("one hundred twenty three")
        '123'
        >>> convert_worded_number("twelve")
        '012'
        >>> convert_worded_number("one point two")
        '001.2'
    """
    text = " ".join(_tokenize(words))
    integer_part, *decimal_parts = text.split(POINT)
    result = _integer_digits(integer_part)
    if decimal_parts:
        result += "." + _decimal_digits(decimal_parts[0])
    return result


def is_number_phrase(text: str) -> bool:
    """Return True if every word of *text* belongs to the number vocabulary.

    At least one word must carry a digit, so bare magnitude or filler words
    such as "hundred" or "and" are rejected.
    """
    tokens = _tokenize(text)
    return (
        all(token in _VOCABULARY for token in tokens)
        and any(token in _DIGIT_WORDS for token in tokens)
    )


def to_ordinal(value: int) -> str:
    """Render *value* with its English ordinal suffix.

    Examples:
        >>> to_ordinal(1)
        '1st'
        >>> to_ordinal(12)
        '12th'
        >>> to_ordinal(122)
        '122nd'
    """
    if abs(value) % 100 in (11, 12, 13):
        return f"{value}th"
    return f"{value}{_ORDINAL_SUFFIXES[abs(value) % 10]}"

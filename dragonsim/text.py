"""Stateless text transformations for the phrase mode of the CLI."""

TERMINAL_PUNCTUATION = ".?!"


def alternate_case(phrase: str) -> str:
    """Alternate lower and upper case over the letters of ``phrase``.

    The first letter is lower case; characters that are not letters are kept as
    they are and do not advance the alternation.

    Example:
        >>> alternate_case("a day in the life")
        'a DaY iN tHe LiFe'
    """
    chars = []
    upper = False
    for char in phrase:
        if char.isalpha():
            chars.append(char.upper() if upper else char.lower())
            upper = not upper
        else:
            chars.append(char)
    return "".join(chars)


def shout(phrase: str) -> str:
    """Upper-case ``phrase`` and end it with an exclamation mark.

    Example:
        >>> shout("a day in the life.")
        'A DAY IN THE LIFE!'
    """
    return phrase.strip().rstrip(TERMINAL_PUNCTUATION).upper() + "!"

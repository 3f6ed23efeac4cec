from errors import InvalidBase, InvalidDigit

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)

# solo ASCII: il lower() Unicode trasformerebbe ad es. il segno Kelvin in 'k'
DIGIT_VALUES = {char: value for value, char in enumerate(DIGITS)}
DIGIT_VALUES.update({char.upper(): value for value, char in enumerate(DIGITS)})


def check_base(base):
    # bool è un int, ma "base True" non ha senso
    if isinstance(base, bool) or not isinstance(base, int) or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)
    return base


def decode(value, base):
    """
    Converte una stringa in base arbitraria (2-36) nel suo valore intero.
    Cifra più significativa a sinistra, lettere case-insensitive.
    Accumulo su int Python (precisione arbitraria), mai in virgola mobile.
    """
    check_base(base)
    if not value:
        raise InvalidDigit(value, base)

    result = 0
    for position, char in enumerate(value):
        digit = DIGIT_VALUES.get(char)
        if digit is None or digit >= base:
            raise InvalidDigit(value, base, position)
        result = result * base + digit

    return result


def encode(number, base):
    """Inverso di decode: intero non negativo -> stringa in base `base`."""
    check_base(base)
    if number < 0:
        raise ValueError("Il numero da codificare deve essere non negativo.")
    if number == 0:
        return DIGITS[0]

    chars = []
    while number:
        number, digit = divmod(number, base)
        chars.append(DIGITS[digit])

    return ''.join(reversed(chars))

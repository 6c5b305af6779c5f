from typing import Iterable, List

TRUE_CHARS = "1Tt"  #: Characters read as a right turn
FALSE_CHARS = "0Ff"  #: Characters read as a left turn
SEPARATORS = " ,_\t\n"  #: Characters ignored while parsing

STYLES = {
    "binary": ("1", "0"),
    "tf": ("T", "F"),
}


def format_bits(bits: Iterable[bool], style: str = "binary") -> str:
    """Render a bit path as text.

    :param bits: Bits to render, ``True`` meaning a right turn.
    :type bits: Iterable[bool]
    :param style: ``"binary"`` for ``1``/``0`` or ``"tf"`` for ``T``/``F``.
    :type style: str
    :returns: One character per bit.
    :rtype: str
    :raises ValueError: If ``style`` is unknown.
    """
    try:
        one, zero = STYLES[style]
    except KeyError:
        raise ValueError(f"Unknown bit style: {style}") from None
    return "".join(one if bit else zero for bit in bits)


def parse_bits(text: str) -> List[bool]:
    """Parse text such as ``"1011"`` or ``"T,F,T,T"`` into a bit path.

    Both styles may be mixed; spaces, commas and underscores are skipped.

    :param text: Textual bit path.
    :type text: str
    :returns: Parsed bits.
    :rtype: List[bool]
    :raises ValueError: If ``text`` holds any other character.
    """
    bits: List[bool] = []
    for pos, ch in enumerate(text):
        if ch in TRUE_CHARS:
            bits.append(True)
        elif ch in FALSE_CHARS:
            bits.append(False)
        elif ch not in SEPARATORS:
            raise ValueError(f"Invalid bit character {ch!r} at position {pos}")
    return bits

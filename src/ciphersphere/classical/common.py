from __future__ import annotations

A_ORD = ord("A")
Z_ORD = ord("Z")
LOWER_A_ORD = ord("a")
LOWER_Z_ORD = ord("z")


def is_az(ch: str) -> bool:
    o = ord(ch)
    return A_ORD <= o <= Z_ORD


def is_lower_az(ch: str) -> bool:
    o = ord(ch)
    return LOWER_A_ORD <= o <= LOWER_Z_ORD


def is_ascii_letter(ch: str) -> bool:
    return is_az(ch) or is_lower_az(ch)


def letter_index(ch: str) -> int:
    """Position 0..25 of an ASCII letter, either case."""
    if is_az(ch):
        return ord(ch) - A_ORD
    if is_lower_az(ch):
        return ord(ch) - LOWER_A_ORD
    raise ValueError(f"Not an ASCII letter: {ch!r}")


def norm_key_alpha(key: str) -> str:
    """Keep only ASCII letters, uppercased."""
    return "".join(ch for ch in key if is_ascii_letter(ch)).upper()


def shift_letter(ch: str, shift: int) -> str:
    """
    Shift one character by 'shift' alphabet positions, preserving case.

    Only ASCII A-Z / a-z are moved; everything else (digits, punctuation,
    whitespace, non-ASCII letters) comes back unchanged. Any integer shift
    is accepted, negative or beyond 25.
    """
    if is_az(ch):
        base = A_ORD
    elif is_lower_az(ch):
        base = LOWER_A_ORD
    else:
        return ch
    idx = ((ord(ch) - base + shift) % 26 + 26) % 26
    return chr(base + idx)


def shift_text(text: str, shift: int) -> str:
    """Caesar shift; preserves non-letters; preserves case."""
    return "".join(shift_letter(ch, shift) for ch in text)


def mirror_letter(ch: str) -> str:
    """Atbash mirror of one character (A<->Z, b<->y); non-letters unchanged."""
    if is_az(ch):
        return chr(Z_ORD - (ord(ch) - A_ORD))
    if is_lower_az(ch):
        return chr(LOWER_Z_ORD - (ord(ch) - LOWER_A_ORD))
    return ch

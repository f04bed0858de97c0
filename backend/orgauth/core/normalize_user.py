"""User Normalization — pure transforms applied to user fields on admission.

Invariants:
    - All functions are PURE: they return new strings, nothing is mutated
    - title_case is idempotent on already title-cased input
    - strip_phone removes exactly PHONE_SEPARATORS, nothing else

Design Decisions:
    - A word is a run of letters, digits, underscores and combining marks, so a
      decomposed accent stays inside its word ("jose\u0301" -> "Jose\u0301");
      an apostrophe between word characters does not start a new word
      ("o'neil" -> "O'neil"), a hyphen or space does ("jean-luc" -> "Jean-Luc")
    - First character uses str.title() so ligatures and sharp s map to their
      titlecase form rather than full uppercase
"""

import unicodedata


PHONE_SEPARATORS: tuple[str, ...] = ("-", "(", ")", " ")

_APOSTROPHES: frozenset[str] = frozenset("'’")


def strip_phone(phone: str) -> str:
    for separator in PHONE_SEPARATORS:
        phone = phone.replace(separator, "")
    return phone


def _is_word_char(ch: str) -> bool:
    """Letters, digits, underscore and combining marks (Mn/Mc/Me)."""
    return ch.isalnum() or ch == "_" or unicodedata.category(ch)[0] == "M"


def title_case(name: str) -> str:
    """English word capitalization: "mary jane" -> "Mary Jane"."""
    out: list[str] = []
    in_word = False
    for i, ch in enumerate(name):
        if _is_word_char(ch):
            out.append(ch.lower() if in_word else ch.title())
            in_word = True
        elif (
            in_word and ch in _APOSTROPHES
            and i + 1 < len(name) and _is_word_char(name[i + 1])
        ):
            out.append(ch)
        else:
            out.append(ch)
            in_word = False
    return "".join(out)


def normalize_names(first_name: str, last_name: str) -> tuple[str, str]:
    return title_case(first_name), title_case(last_name)

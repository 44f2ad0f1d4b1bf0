# logic/parser/argument_tokenizer.py

"""
Splits a command's argument string into prefix-tagged values.

Given `" 1 n/Alex Yeoh c/math-1000 c/phys-2000"` and the prefixes `n/` and `c/`, the tokenizer
produces a preamble of `"1"`, one value for `n/` and two values for `c/`. A prefix is only
recognized at the start of the string or immediately after whitespace, so `"abc/def"` is never
read as containing the prefix `c/`.
"""

from __future__ import annotations

from core.exceptions import ParseError
from logic.messages import MESSAGE_DUPLICATE_FIELDS


class ArgumentMultimap:
    """
    Maps each prefix to the list of values that followed it, in the order they appeared.

    The preamble (text before the first recognized prefix) is stored under the empty-string key.
    """

    def __init__(self):
        self._values: dict[str, list[str]] = {}

    def put(self, prefix: str, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def contains(self, prefix: str) -> bool:
        return prefix in self._values

    def get_value(self, prefix: str) -> str | None:
        """Returns the last value given for `prefix`, or None if it was never given."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        return self.get_value("") or ""

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        """
        Raises:
            ParseError: If any of `prefixes` was given more than once.
        """
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]

        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS + " ".join(duplicated))


def _find_prefix_positions(args: str, prefix: str) -> list[int]:
    positions = []
    start = args.find(prefix)

    while start != -1:
        if start == 0 or args[start - 1].isspace():
            positions.append(start)
        start = args.find(prefix, start + 1)

    return positions


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """
    Tokenizes an argument string into an `ArgumentMultimap`.

    Args:
        args (str): The raw argument string, usually everything after the command word.
        *prefixes (str): The prefixes to recognize. Any other text is treated as part of a value.

    Returns:
        ArgumentMultimap: Preamble and prefixed values, each stripped of surrounding whitespace.
    """
    positions = sorted(
        (pos, prefix) for prefix in prefixes for pos in _find_prefix_positions(args, prefix)
    )

    multimap = ArgumentMultimap()
    preamble_end = positions[0][0] if positions else len(args)
    multimap.put("", args[:preamble_end].strip())

    for i, (pos, prefix) in enumerate(positions):
        value_end = positions[i + 1][0] if i + 1 < len(positions) else len(args)
        multimap.put(prefix, args[pos + len(prefix) : value_end].strip())

    return multimap


def find_unrecognized_prefixes(args: str, allowed: tuple[str, ...] | list[str]) -> list[str]:
    """
    Finds whitespace-separated tokens that look like a prefix but are not one of `allowed`.

    A token is flagged if, after removing a leading allowed prefix, it still contains a `/`.
    This catches unknown prefixes (`b/test`), prefixes belonging to other commands (`l/JC1` when
    only `c/` is allowed), bare slashes (`/test`) and trailing-slash words (`asdfas/`).

    Returns:
        The offending tokens, in the order they appear. Empty if the input is clean.
    """
    stray = []

    for token in args.split():
        rest = token
        for prefix in allowed:
            if token.startswith(prefix):
                rest = token[len(prefix) :]
                break

        if "/" in rest:
            stray.append(token)

    return stray

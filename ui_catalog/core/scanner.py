"""Textual import scanner for component source code.

The scanner never parses or executes code. It recognises three shapes:

    relative import   import <clause> from '../<path>'
    module specifier  import <clause> from '<spec>'   |   import '<spec>'
    token usage       <token> as a whole identifier anywhere in the text

The clause of an import may span several lines. Quotes may be single or
double. Everything else in the text is ignored.
"""

import re
from dataclasses import dataclass

_FROM_IMPORT = re.compile(r"""\bimport\b[^;'"]*?\bfrom\s*(['"])([^'"\n]+)\1""")
_SIDE_EFFECT_IMPORT = re.compile(r"""\bimport\s*(['"])([^'"\n]+)\1""")

PARENT_PREFIX = "../"


@dataclass(frozen=True)
class ScanResult:
    """Identifiers referenced by a piece of source text."""

    specifiers: tuple[str, ...]
    relative_imports: tuple[str, ...]

    @property
    def packages(self) -> tuple[str, ...]:
        """Bare (non-relative) module specifiers."""
        return tuple(s for s in self.specifiers if not s.startswith("."))


def _distinct(items: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def module_specifiers(text: str) -> tuple[str, ...]:
    """All module specifiers imported by ``text``, in order of appearance."""
    found: list[tuple[int, str]] = []
    for pattern in (_FROM_IMPORT, _SIDE_EFFECT_IMPORT):
        found.extend((m.start(), m.group(2)) for m in pattern.finditer(text))
    found.sort()
    return _distinct([spec for _, spec in found])


def relative_imports(text: str) -> tuple[str, ...]:
    """Parent-relative paths (``'../X/Y'`` -> ``'X/Y'``) imported with a from-clause."""
    paths = [
        m.group(2)[len(PARENT_PREFIX):]
        for m in _FROM_IMPORT.finditer(text)
        if m.group(2).startswith(PARENT_PREFIX)
    ]
    return _distinct([p for p in paths if p])


def token_used(text: str, token: str) -> bool:
    """True when ``token`` appears in ``text`` as a whole identifier."""
    return re.search(rf"(?<![\w$]){re.escape(token)}(?![\w$])", text) is not None


def scan(text: str) -> ScanResult:
    """Scan source text for the identifiers it references."""
    return ScanResult(
        specifiers=module_specifiers(text),
        relative_imports=relative_imports(text),
    )


def path_segment(path: str) -> str:
    """First component of a relative import path (``'Spinner/Spinner'`` -> ``'Spinner'``)."""
    return path.split("/", 1)[0]

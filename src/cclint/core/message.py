"""Structured view of a commit message and the parser that builds it."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEADER_PATTERN = re.compile(
    r"^(?P<type>[^\s():!]+)(?:\((?P<scope>[^()]*)\))?!?:[ \t]*(?P<description>.*)$"
)
_FOOTER_PATTERN = re.compile(r"^(?P<token>BREAKING[ -]CHANGE|[\w-]+)(?:: | (?=#))(?P<value>.*)$")
_PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n")


@dataclass(frozen=True, slots=True)
class Footer:
    """A single ``Token: value`` trailer, e.g. ``Refs: #123``."""

    token: str
    value: str


@dataclass(frozen=True, slots=True)
class Message:
    """A parsed commit message.

    ``raw`` always holds the exact source text.  Every other field is
    ``None`` when the parser found no corresponding syntax in ``raw``.

    Example::

        >>> parse("feat(api): add endpoint").scope
        'api'

    """

    raw: str
    type: str | None = None
    scope: str | None = None
    description: str | None = None
    body: str | None = None
    footers: tuple[Footer, ...] | None = None

    @property
    def header(self) -> str:
        """First line of the raw text."""
        return self.raw.splitlines()[0] if self.raw else ""


def parse(raw: str) -> Message:
    """Parse conventional-commit text into a :class:`Message`.

    Header grammar is ``<type>[(<scope>)][!]: <description>``.  Empty
    parentheses yield ``scope=None``.  A header that does not follow the
    grammar leaves ``type``, ``scope`` and ``description`` unset; body and
    footers are still extracted.  Never raises.
    """
    header, _, rest = raw.replace("\r\n", "\n").partition("\n")

    commit_type = scope = description = None
    if (match := _HEADER_PATTERN.match(header.strip())) is not None:
        commit_type = match.group("type")
        scope = _non_blank(match.group("scope"))
        description = _non_blank(match.group("description"))

    paragraphs = [p.strip("\n") for p in _PARAGRAPH_BREAK.split(rest.strip("\n")) if p.strip()]

    footers: tuple[Footer, ...] | None = None
    if paragraphs and (parsed := _parse_footers(paragraphs[-1])) is not None:
        footers = parsed
        paragraphs.pop()

    body = "\n\n".join(paragraphs).strip() or None

    return Message(
        raw=raw,
        type=commit_type,
        scope=scope,
        description=description,
        body=body,
        footers=footers,
    )


def _non_blank(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_footers(paragraph: str) -> tuple[Footer, ...] | None:
    """Return footers when *paragraph* is a trailer block, else ``None``.

    The first line must start a footer; later lines either start a new
    footer or continue the previous value.
    """
    lines = paragraph.split("\n")
    if _FOOTER_PATTERN.match(lines[0]) is None:
        return None

    entries: list[list[str]] = []
    for line in lines:
        if (match := _FOOTER_PATTERN.match(line)) is not None:
            entries.append([match.group("token"), match.group("value")])
        else:
            entries[-1][1] += "\n" + line

    return tuple(Footer(token, value.strip()) for token, value in entries)

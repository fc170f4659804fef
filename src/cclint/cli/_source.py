import sys
from pathlib import Path

_SCISSORS = "# ------------------------ >8 ------------------------"


class SourceError(Exception):
    """Raised when a commit message source cannot be read."""


def read_source(source: str) -> str:
    """Read commit text from a file path, or from stdin when *source* is ``-``.

    Git comment lines and everything below the scissors line (as written by
    ``git commit --verbose``) are dropped, matching what git itself stores.
    """
    if source == "-":
        try:
            text = sys.stdin.buffer.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Could not read '<stdin>': {exc}"
            raise SourceError(msg) from exc
    else:
        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            msg = f"No such file: {source!r}"
            raise SourceError(msg) from None
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Could not read {source!r}: {exc}"
            raise SourceError(msg) from exc

    return strip_comments(text)


def strip_comments(text: str) -> str:
    kept: list[str] = []
    for line in text.splitlines():
        if line.startswith(_SCISSORS):
            break
        if line.startswith("#"):
            continue
        kept.append(line)
    return "\n".join(kept).strip("\n")

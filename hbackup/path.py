"""Path helpers: home expansion, absolutising and existence checks."""

from __future__ import annotations

import os
from pathlib import Path


def check_path(path: Path | str) -> Path:
    """Return ``path`` if it exists and is accessible, else raise ValueError."""
    try:
        os.stat(path)
    except OSError as exc:
        raise ValueError(f"Source path or file '{path}' is invalid: {exc}") from exc
    return Path(path)


def expand_home(text: str) -> str:
    """Replace a leading ``~`` or ``$HOME`` with the user's home directory."""
    for prefix in ("~", "$HOME"):
        if text.startswith(prefix):
            try:
                home = str(Path.home())
            except (RuntimeError, KeyError):
                return text
            return home + text[len(prefix):]
    return text


def _clean(path: Path) -> Path:
    anchor = path.anchor
    parts = path.parts[1:] if anchor else path.parts
    stack: list[str] = []
    for part in parts:
        if part == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            elif not anchor:
                stack.append(part)
        elif part != ".":
            stack.append(part)
    if not anchor and not stack:
        return Path(".")
    return Path(anchor, *stack)


def expand_path(path: str) -> Path:
    """Expand home, make absolute against the working directory, and clean lexically."""
    candidate = Path(expand_home(path))
    if not candidate.is_absolute():
        candidate = Path.cwd() / candidate
    return _clean(candidate)
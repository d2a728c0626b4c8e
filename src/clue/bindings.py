"""Explicit-release interface around ``compile``.

Mirrors the C entry points ``clue_compile`` / ``clue_free_string``: the
caller owns the returned buffer and releases it when done. The text stays
readable until then.
"""

from __future__ import annotations

from typing import Optional, Union

from .compiler import compile


class CompiledString:
    def __init__(self, text: str):
        self._text: Optional[str] = text

    @property
    def value(self) -> str:
        if self._text is None:
            raise ValueError("compiled string already released")
        return self._text

    @property
    def released(self) -> bool:
        return self._text is None

    def release(self) -> None:
        self._text = None

    def __enter__(self) -> "CompiledString":
        return self

    def __exit__(self, *exc) -> None:
        self.release()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        if self._text is None:
            return "<CompiledString released>"
        return f"<CompiledString {self._text!r}>"


def clue_compile(code: Union[str, bytes]) -> CompiledString:
    if isinstance(code, bytes):
        code = code.decode("utf-8", errors="replace")
    return CompiledString(compile(code))


def clue_free_string(s: Optional[CompiledString]) -> None:
    if s is None:
        return
    s.release()


__all__ = ["CompiledString", "clue_compile", "clue_free_string"]

"""BaseError: root of the parse, metadata and configuration errors.

A failed parse, an unreadable metadata document and a bad setting all end
up in the same structured log stream, so every error carries a machine
slug (``code``) next to the human message, plus the facts needed to
reproduce it (``detail``): the :class:`ErrorType` of a parse failure, the
path of a metadata source, the name of a setting.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Error with a ``code`` slug and a JSON-serialisable ``detail`` mapping.

    Subclasses set ``default_code``; callers rarely pass ``code``. The
    *detail* mapping is copied, so subclasses may add keys to
    ``self.detail`` without touching the caller's dict. *cause* is the
    lower-level exception (an ``OSError`` reading metadata, a
    ``json.JSONDecodeError``) and is stored as ``__cause__``.

    ``str(err)`` is a single JSON line, the form log processors expect.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = {**(detail or {})}
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        """The chained lower-level exception, also when set by ``raise ... from``."""
        return self.__cause__

    def to_dict(self) -> dict[str, Any]:
        """``code``, ``message`` and ``detail``, plus ``cause`` as its repr when set."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload

    def __str__(self) -> str:
        # Region names and raw input may be non-ASCII; keep them readable.
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]

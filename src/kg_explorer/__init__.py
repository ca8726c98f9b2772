"""Knowledge graph explorer package."""

from __future__ import annotations

from typing import Any

__all__ = ["explore"]


def explore(*args: Any, **kwargs: Any) -> Any:
    from .pipeline import explore as _impl

    return _impl(*args, **kwargs)

"""Placeholder substitution for the bundled file templates."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

from .errors import TemplateRenderingError

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")
_MISSING_POLICIES = frozenset({"keep", "empty", "error"})


def _toml_string(value: Any) -> str:
    """Quote ``value`` as a TOML basic string, quotes included."""

    # JSON string escapes are a subset of TOML basic-string escapes as long as
    # non-ASCII text is emitted raw rather than as surrogate pairs.
    return json.dumps(str(value), ensure_ascii=False)


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions.

    Only single braces are left alone, which keeps f-strings and TOML inline
    tables inside templates intact.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "upper": lambda value: str(value).upper(),
                    "lower": lambda value: str(value).lower(),
                    "strip": lambda value: str(value).strip(),
                    "repr": lambda value: repr(value),
                    "toml": _toml_string,
                }
            )

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: str = "keep",
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template string to evaluate.
        context:
            Mapping providing values for placeholders.
        missing:
            Controls what happens when a placeholder has no value in
            ``context``: ``"keep"`` leaves the placeholder as written,
            ``"empty"`` drops it and ``"error"`` raises
            :class:`TemplateRenderingError`.
        """

        if missing not in _MISSING_POLICIES:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        def substitute(match: re.Match[str]) -> str:
            key, *filters = [part.strip() for part in match.group("expression").split("|")]
            if not key:
                return match.group(0)

            if key not in context:
                if missing == "keep":
                    return match.group(0)
                if missing == "empty":
                    return ""
                raise TemplateRenderingError(f"missing value for '{key}'")

            value = context[key]
            for filter_name in filters:
                if filter_name:
                    value = _apply_filter(value, filter_name, self.filters)
            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

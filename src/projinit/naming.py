"""Name derivation for generated projects."""

from __future__ import annotations

import keyword
import logging

__all__ = ["derive_package_name", "is_importable_name"]


LOGGER = logging.getLogger(__name__)


def derive_package_name(project_name: str) -> str:
    """Return the import package name for ``project_name``.

    Every hyphen is replaced with an underscore and no other character is
    touched, so ``"my-project"`` becomes ``"my_project"`` while
    ``"My Project"`` is returned unchanged. Use :func:`is_importable_name` to
    check whether the result can actually be imported.
    """

    package = project_name.replace("-", "_")
    if not is_importable_name(package):
        LOGGER.warning(
            "package name %r derived from %r is not a valid Python identifier",
            package,
            project_name,
        )
    return package


def is_importable_name(name: str) -> bool:
    """Return ``True`` when ``name`` can be used in an ``import`` statement."""

    return name.isidentifier() and not keyword.iskeyword(name)

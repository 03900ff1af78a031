"""Generate unique anchor slugs for headings."""

from __future__ import annotations

import re

from mdlite.html_utils import strip_tags

_PUNCTUATION_RE = re.compile(r"[\u2000-\u206F\u2E00-\u2E7F\\'!\"#$%&()*+,./:;<=>?@\[\]^`{|}~]")
_WHITESPACE_RE = re.compile(r"\s")


class Slugger:
    """Hand out unique slugs for the headings of one document.

    Repeated values get a numeric suffix: ``intro``, ``intro-1``, ``intro-2``.
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    @staticmethod
    def serialize(value: str) -> str:
        """Normalize ``value`` into slug form without checking uniqueness."""
        slug = strip_tags(value.lower().strip())
        slug = _PUNCTUATION_RE.sub("", slug)
        return _WHITESPACE_RE.sub("-", slug)

    def slug(self, value: str, *, dry_run: bool = False) -> str:
        """Return the next unique slug for ``value``.

        Args:
            value: Heading text.
            dry_run: If True, compute the slug without recording it.
        """
        base = self.serialize(value)
        slug = base
        occurrences = 0
        if slug in self._seen:
            occurrences = self._seen[base]
            while True:
                occurrences += 1
                slug = f"{base}-{occurrences}"
                if slug not in self._seen:
                    break
        if not dry_run:
            self._seen[base] = occurrences
            self._seen[slug] = 0
        return slug

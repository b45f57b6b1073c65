"""Slug generation for post URLs and tag names."""

import re
from collections.abc import Iterable
from itertools import chain, count

from unidecode import unidecode

_NON_ALNUM = re.compile(r'[^a-z0-9]+')


def slugify(text: str) -> str:
    """Convert arbitrary text to a lowercase, hyphenated, URL-safe token.

    Used both for the post slug and for every tag, so tags that differ only
    in case or punctuation collapse to the same value.

    Examples:
        'Builder APIs in Rust' -> 'builder-apis-in-rust'
        'Budúcnosť medicíny!'  -> 'buducnost-mediciny'
        '  --Design Pattern--' -> 'design-pattern'
        '!!!'                  -> ''
    """
    # Transliterate before lowercasing: unidecode can emit capitals ('Æ' -> 'AE')
    slug = unidecode(text).lower()
    slug = _NON_ALNUM.sub('-', slug)
    return slug.strip('-')


def unique_slug(slug: str, existing_files: Iterable[str], ext: str = '.md') -> str:
    """Return the first of slug, slug-2, slug-3, ... with no '<name><ext>' file taken.

    Only names ending in ext count, so 'my-post.txt' does not block 'my-post'.
    """
    taken = {name[:len(name) - len(ext)] for name in existing_files if name.endswith(ext)}
    candidates = chain([slug], (f'{slug}-{n}' for n in count(2)))
    return next(c for c in candidates if c not in taken)

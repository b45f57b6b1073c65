"""YAML front matter assembly and serialization for blog posts."""

import copy
from collections.abc import Iterable, Mapping
from typing import Any

import yaml

# Keys owned by the post itself; these always override user metadata
RESERVED_KEYS = ('slug', 'title', 'tags')


def merge_frontmatter(
    meta: Mapping[str, Any],
    *,
    slug: str,
    title: str,
    tags: Iterable[str],
) -> dict[str, Any]:
    """Merge user metadata with the post's own slug, title and tags.

    Derived fields always win: whatever the caller stored under 'slug',
    'title' or 'tags' is replaced. The metadata is deep-copied, so later
    changes to the caller's lists or dicts do not reach the result. Tags
    are a sorted tuple. The result is ordered by key.
    """
    merged = copy.deepcopy(dict(meta))
    merged['slug'] = slug
    merged['title'] = title
    merged['tags'] = tuple(sorted(tags))
    return {key: merged[key] for key in sorted(merged)}


def dump_frontmatter(frontmatter: Mapping[str, Any]) -> str:
    """Serialize a front matter mapping to block-style YAML.

    Keys are sorted, scalars use PyYAML's default styling, and the text ends
    with a newline. Tuples render as plain sequences. Values YAML cannot
    represent raise yaml.representer.RepresenterError.
    """
    return yaml.safe_dump(
        _to_plain(frontmatter),
        sort_keys=True,
        default_flow_style=False,
        allow_unicode=True,
        width=float('inf'),
    )


def _to_plain(value: Any) -> Any:
    # SafeDumper has no representer for tuples or mapping proxies
    if isinstance(value, Mapping):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    return value

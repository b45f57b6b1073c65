"""Blog post model and the fluent template used to build it.

Typical use:

    post = (
        BlogPost.new('Builder APIs in Rust')
        .add_tag('rust')
        .add_tag('design-pattern')
        .with_slug('builder-apis')
        .post('do this, then that')
    )
    print(post.as_file())
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from postbuilder.lib.frontmatter import dump_frontmatter, merge_frontmatter
from postbuilder.lib.slug import slugify

SEPARATOR = '---\n\n'


@dataclass(frozen=True)
class BlogPost:
    """Immutable blog post: front matter plus body."""

    frontmatter: Mapping[str, Any]
    title: str
    slug: str
    tags: tuple[str, ...]
    body: str = ''

    @staticmethod
    def new(title: str) -> PostTemplate:
        """Start building a post. The slug is derived from the title."""
        return PostTemplate(title)

    @classmethod
    def from_template(cls, template: PostTemplate) -> BlogPost:
        frontmatter = merge_frontmatter(
            template.meta,
            slug=template.slug,
            title=template.title,
            tags=template.tags,
        )
        return cls(
            frontmatter=MappingProxyType(frontmatter),
            title=template.title,
            slug=template.slug,
            tags=frontmatter['tags'],
            body=template.body if template.body is not None else '',
        )

    def as_frontmatter(self) -> str:
        return dump_frontmatter(self.frontmatter)

    def as_file(self) -> str:
        """Front matter, the '---' separator line, a blank line, then the body verbatim."""
        return f'{self.as_frontmatter()}{SEPARATOR}{self.body}'


class PostTemplate:
    """Mutable, single-use staging area for a BlogPost.

    Every mutator returns the template itself so calls can be chained.
    post() consumes the template; touching it afterwards raises RuntimeError.
    """

    def __init__(self, title: str):
        self.title = title
        self.slug = slugify(title)
        self.tags: set[str] = set()
        self.meta: dict[str, Any] = {}
        self.body: str | None = None
        self._consumed = False

    def with_slug(self, slug: str) -> PostTemplate:
        self._check_open()
        self.slug = slugify(slug)
        return self

    def add_tag(self, tag: str) -> PostTemplate:
        """Add one tag, normalized. Re-adding an equivalent tag is a no-op.

        Tags that normalize to '' (e.g. '!!!') are kept as-is.
        """
        self._check_open()
        self.tags.add(slugify(tag))
        return self

    def add_tags(self, *tags: str) -> PostTemplate:
        for tag in tags:
            self.add_tag(tag)
        return self

    def set_property(self, key: str, value: Any) -> PostTemplate:
        """Set a front matter value, overwriting any previous one.

        'slug', 'title' and 'tags' are accepted but always replaced by the
        post's own values when post() runs.
        """
        self._check_open()
        self.meta[key] = value
        return self

    def post(self, body: str) -> BlogPost:
        """Supply the body and freeze the template into a BlogPost."""
        self._check_open()
        self.body = body
        self._consumed = True
        return BlogPost.from_template(self)

    def _check_open(self):
        if self._consumed:
            raise RuntimeError(
                f'Post template for "{self.title}" was already turned into a post'
            )

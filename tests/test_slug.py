"""Slug and tag normalization tests."""

import re

import pytest

from postbuilder.lib.slug import slugify, unique_slug

_SLUG_SHAPE = re.compile(r'^([a-z0-9]+(-[a-z0-9]+)*)?$')


class TestSlugify:
    """Any text maps to a lowercase, hyphenated, URL-safe token."""

    def test_title_becomes_hyphenated_lowercase(self):
        assert slugify('Builder APIs in Rust') == 'builder-apis-in-rust'

    def test_diacritics_are_transliterated(self):
        assert slugify('Budúcnosť medicíny v zajatí algoritmov') == 'buducnost-mediciny-v-zajati-algoritmov'
        assert slugify('Straße') == 'strasse'

    def test_non_latin_scripts_are_transliterated(self):
        assert slugify('Привет мир') == 'privet-mir'

    def test_transliterated_capitals_are_lowered(self):
        assert slugify('Æsir') == 'aesir'

    def test_punctuation_runs_collapse_to_one_hyphen(self):
        assert slugify('rust -- & -- design') == 'rust-design'

    def test_leading_and_trailing_separators_are_stripped(self):
        assert slugify('  --Design Pattern!--  ') == 'design-pattern'

    def test_empty_and_punctuation_only_input_yields_empty_slug(self):
        assert slugify('') == ''
        assert slugify('!!! ??? ...') == ''

    @pytest.mark.parametrize('variant', [
        'design-pattern',
        'Design Pattern',
        '  DESIGN_PATTERN  ',
        'design/pattern!',
        '...Design...Pattern...',
    ])
    def test_equivalent_spellings_normalize_identically(self, variant):
        assert slugify(variant) == 'design-pattern'

    @pytest.mark.parametrize('text', [
        'Hello, World!',
        '--a--b--',
        'C++ & C#',
        'Ünïcödé Ťítlé 2024',
        '\t\n mixed\twhitespace\n',
        '日本語のタイトル',
        '🚀 launch',
        '',
    ])
    def test_output_shape_is_always_valid(self, text):
        slug = slugify(text)
        assert _SLUG_SHAPE.match(slug), slug
        assert slugify(slug) == slug


class TestUniqueSlug:
    """Written posts never overwrite an existing file with the same slug."""

    def test_free_slug_is_returned_unchanged(self):
        assert unique_slug('my-post', ['other.md']) == 'my-post'

    def test_colliding_slug_gets_numeric_suffix(self):
        assert unique_slug('my-post', ['my-post.md']) == 'my-post-2'

    def test_suffix_skips_taken_numbers(self):
        existing = ['my-post.md', 'my-post-2.md', 'my-post-3.md']
        assert unique_slug('my-post', existing) == 'my-post-4'

    def test_files_with_other_extensions_do_not_collide(self):
        assert unique_slug('my-post', ['my-post.txt', 'my-post']) == 'my-post'

    def test_custom_extension(self):
        assert unique_slug('my-post', ['my-post.html', 'my-post.md'], ext='.html') == 'my-post-2'

    def test_accepts_any_iterable(self):
        assert unique_slug('my-post', (name for name in ['my-post.md'])) == 'my-post-2'

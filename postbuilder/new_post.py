#!/usr/bin/env python3
"""Create a blog post file with YAML front matter.

Builds a post from a title, optional tags, slug and extra front matter
properties, then prints it or writes it to <output-dir>/<slug>.md.

Usage:
    new-post Builder APIs in Rust                         # Print to stdout
    new-post "Builder APIs in Rust" -t rust,design-pattern -S builder-apis
    new-post "Release notes" -p draft=true -p 'authors=["ana", "ben"]'
    new-post "Release notes" --body-file notes.md -o blog/    # Write blog/release-notes.md
    new-post "Release notes" -o blog/ --dry-run               # Preview without writing
"""

import argparse
import json
import os
import sys

from postbuilder.lib.post import BlogPost, PostTemplate
from postbuilder.lib.slug import unique_slug

OUTPUT_DIR_ENV = 'POSTBUILDER_OUTPUT_DIR'


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    title = ' '.join(args.title).strip()
    if not title:
        print('Error: Title cannot be empty', file=sys.stderr)
        sys.exit(2)

    try:
        properties = parse_properties(args.property)
        body = read_body(args)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(2)

    template = build_template(title, args.slug, args.tag, properties)

    if args.verbose:
        print(f'  Title: {template.title}', file=sys.stderr)
        print(f'  Slug: {template.slug}', file=sys.stderr)
        print(f'  Tags: {", ".join(sorted(template.tags)) or "(none)"}', file=sys.stderr)
        print(f'  Properties: {len(template.meta)}', file=sys.stderr)
        print(f'  Body length: {len(body)} chars', file=sys.stderr)

    try:
        post = template.post(body)
        output_dir = args.output_dir or os.environ.get(OUTPUT_DIR_ENV)
        if output_dir:
            write_post(post, output_dir, args.dry_run)
        else:
            print(post.as_file())
    except Exception as e:
        print(f'ERROR: {e}', file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)

    sys.exit(0)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Create a blog post with YAML front matter.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  new-post Builder APIs in Rust
  new-post "Builder APIs in Rust" --tag rust,design-pattern --slug builder-apis
  new-post "Release notes" --property draft=true --body-file notes.md -o blog/

The output directory defaults to ${OUTPUT_DIR_ENV} when set.
        """,
    )
    parser.add_argument(
        'title', nargs='+',
        help='Post title (multiple words are joined with spaces)',
    )
    parser.add_argument(
        '--slug', '-S',
        help='Slug override (normalized, default: derived from title)',
    )
    parser.add_argument(
        '--tag', '-t', action='append', default=[],
        help='Tag(s), comma-separated; may be repeated (e.g., "rust,design-pattern")',
    )
    parser.add_argument(
        '--property', '-p', action='append', default=[], metavar='KEY=VALUE',
        help='Extra front matter entry; VALUE is parsed as JSON, else kept as text',
    )
    body_group = parser.add_mutually_exclusive_group()
    body_group.add_argument(
        '--body', '-b', default='',
        help='Post body text (default: empty)',
    )
    body_group.add_argument(
        '--body-file',
        help='Read the post body from a file',
    )
    parser.add_argument(
        '--output-dir', '-o',
        help='Write <slug>.md into this directory instead of printing',
    )
    parser.add_argument(
        '--dry-run', action='store_true',
        help='Preview output without writing files',
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Show detailed processing info',
    )
    return parser.parse_args(argv)


def parse_properties(pairs: list[str]) -> dict:
    """Parse KEY=VALUE pairs into front matter values.

    VALUE is decoded as JSON when possible ('3', 'true', '["a", "b"]'),
    otherwise it is kept as a plain string.
    """
    properties = {}
    for pair in pairs:
        key, sep, raw = pair.partition('=')
        key = key.strip()
        if not sep or not key:
            raise ValueError(f'Invalid property "{pair}" (expected KEY=VALUE)')
        try:
            properties[key] = json.loads(raw)
        except json.JSONDecodeError:
            properties[key] = raw
    return properties


def read_body(args: argparse.Namespace) -> str:
    if not args.body_file:
        return args.body
    try:
        with open(args.body_file, encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise ValueError(f'Could not read body file {args.body_file}: {e.strerror}') from e


def build_template(
    title: str,
    slug: str | None,
    tag_args: list[str],
    properties: dict,
) -> PostTemplate:
    """Compose the post template from parsed CLI values."""
    template = BlogPost.new(title)
    for tag_arg in tag_args:
        template.add_tags(*(t.strip() for t in tag_arg.split(',')))
    if slug:
        template.with_slug(slug)
    for key, value in properties.items():
        template.set_property(key, value)
    return template


def write_post(post: BlogPost, output_dir: str, dry_run: bool = False) -> str:
    """Write the post to <output_dir>/<slug>.md without clobbering existing files."""
    if not post.slug:
        raise ValueError(f'Post "{post.title}" has an empty slug; pass --slug')
    existing = os.listdir(output_dir) if os.path.isdir(output_dir) else []
    slug = unique_slug(post.slug, existing)
    output_path = os.path.join(output_dir, f'{slug}.md')

    if dry_run:
        print(f'  [DRY RUN] Would create: {output_path}')
        print(f'  Slug: {slug}')
        print('  ---')
        for line in post.as_frontmatter().splitlines():
            print(f'  {line}')
        print('  ---')
        preview = post.body[:300].replace('\n', '\n  ')
        print(f'  {preview}...')
        return output_path

    text = post.as_file()
    os.makedirs(output_dir, exist_ok=True)
    # 'x' fails with FileExistsError if the file appeared after the listdir above
    with open(output_path, 'x', encoding='utf-8') as f:
        f.write(text)
    print(f'  Created: {output_path}')
    return output_path


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
Config Generator for the VIER catalog

Builds config.py from environment variables, for containers and CI jobs
where nobody edits config.py by hand. The output has the same layout as
config.example.py.

Usage:
    python3 utils/config_generator.py                      # writes ./config.py
    python3 utils/config_generator.py -o /etc/vier/config.py
    python3 utils/config_generator.py --dry-run            # print only
"""

import argparse
import os
import re
import sys
from typing import Any, Callable, List, NamedTuple, Optional


# Values that stand for "explicitly empty" in CI secret stores
EMPTY_PLACEHOLDERS = ('__EMPTY__', '__NULL__', 'null', 'none', 'NULL', 'NONE')

ENV_PREFIX = 'VIER_'

HEADER = '''"""
VIER catalog configuration
Generated by utils/config_generator.py - edit the environment, not this file
"""
'''


def get_env(name: str, default: str = '') -> str:
    """Read setting *name* from the environment.

    ``VIER_<name>`` wins over a plain ``<name>``; an unset or blank variable
    yields *default*, a placeholder from ``EMPTY_PLACEHOLDERS`` yields ''.
    """
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None:
        raw = os.environ.get(name)
    if raw in EMPTY_PLACEHOLDERS:
        return ''
    return raw if raw else default


def get_env_int(name: str, default: int) -> int:
    raw = get_env(name, '')
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def format_python_value(value: Any) -> str:
    """Render *value* as a Python literal for config.py."""
    if value is None:
        return 'None'
    if isinstance(value, str):
        return repr(value)
    return str(value)


class Setting(NamedTuple):
    name: str
    reader: Callable
    default: Any
    section: str
    comment: Optional[str] = None


def get_config_map() -> List[Setting]:
    """All settings written to config.py, in output order."""
    return [
        Setting('BASE_URL', get_env, 'https://www.vier.be', 'Site Configuration'),
        Setting('API_BASE_URL', get_env, 'https://api.viervijfzes.be', 'Site Configuration'),
        Setting('CATEGORIES_URL', get_env, 'https://www.vier.be/api/categories', 'Site Configuration'),
        Setting('SEARCH_SITE', get_env, 'vier', 'Site Configuration',
                'Site scope sent with every search request'),
        Setting('REQUEST_TIMEOUT', get_env_int, 30, 'Request Configuration',
                'Seconds per upstream request'),
        Setting('ACCESS_TOKEN', get_env, '', 'Authentication',
                'Only the /video/{uuid} endpoint sends it'),
        Setting('LOG_LEVEL', get_env, 'INFO', 'Logging Configuration',
                'Options: DEBUG, INFO, WARNING, ERROR, CRITICAL'),
        Setting('LOG_FILE', get_env, 'logs/vier_catalog.log', 'Logging Configuration'),
    ]


def generate_config_content() -> str:
    """Render config.py from the current environment."""
    lines = [HEADER]
    section = None
    for setting in get_config_map():
        if setting.section != section:
            if section is not None:
                lines.append('')
            section = setting.section
            lines.append(f'# === {section} ===')
        value = setting.reader(setting.name, setting.default)
        line = f'{setting.name} = {format_python_value(value)}'
        if setting.comment:
            line += f'  # {setting.comment}'
        lines.append(line)
    lines.append('')
    return '\n'.join(lines)


def mask_sensitive_values(content: str) -> str:
    """Hide non-empty token values so the content can be echoed to a CI log."""
    return re.sub(r"""^(\w*TOKEN\w*\s*=\s*)(['"])(?!\2).+?\2""", r"\1\2***MASKED***\2",
                  content, flags=re.MULTILINE)


def write_config(output_path: str = 'config.py', dry_run: bool = False, show_masked: bool = True) -> bool:
    """Generate config.py and write it to *output_path*.

    Returns:
        False when the file could not be written, True otherwise
    """
    content = generate_config_content()

    if dry_run:
        print(f"✓ Dry run - {output_path} would contain:")
    else:
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            print(f"✗ Failed to write {output_path}: {e}")
            return False
        print(f"✓ {output_path} generated")

    if show_masked:
        print(mask_sensitive_values(content))
    return True


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Generate the VIER catalog config.py from environment variables')
    parser.add_argument('--output', '-o', default='config.py',
                        help='Where to write config.py (default: ./config.py)')
    parser.add_argument('--dry-run', action='store_true',
                        help='Only print the generated config')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Do not echo the (masked) config')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_arguments(argv)
    ok = write_config(output_path=args.output, dry_run=args.dry_run, show_masked=not args.quiet)
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())

#!/usr/bin/env python3
# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for checking data files against a schema."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from ..config import OUTPUT_FORMATS, validator_config
from ..exceptions import SchemaReferenceError
from ..file_io import SourceLocation, display_path, format_source
from . import CheckResult, check_files, resolve_schema_reference

DATA_EXTENSIONS = ('.yaml', '.yml', '.json')

logger = logging.getLogger(__name__)


def find_data_files(paths: List[str]) -> List[Path]:
    """Find all YAML/JSON data files in given paths."""
    data_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            if path.suffix.lower() in DATA_EXTENSIONS:
                data_files.append(path)
            else:
                logger.warning(f"File is not a YAML or JSON file: {path}")
        elif path.is_dir():
            # Recursively find all data files
            for ext in DATA_EXTENSIONS:
                data_files.extend(path.rglob(f'*{ext}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(data_files))


def _print_human(results: List[CheckResult]) -> None:
    for result in results:
        if not result.errors:
            continue
        print(f"\n{display_path(result.file_path, validator_config.source_root)}:")
        for error in result.errors:
            loc = SourceLocation(
                yaml_path=error.get('yaml_path'),
                line=error.get('line'),
                column=error.get('column'),
            )
            line_info = f":{loc.line}" if loc.line is not None else ""
            print(f"  ERROR{line_info}: {error['message']}{format_source(loc)}")


def _print_json(results: List[CheckResult]) -> None:
    output = {
        'files': len(results),
        'errors': sum(len(r.errors) for r in results),
        'results': [r.to_dict() for r in results],
    }
    print(json.dumps(output, indent=2))


def _print_github_actions(results: List[CheckResult]) -> None:
    for result in results:
        file_path = display_path(result.file_path, validator_config.source_root)
        for error in result.errors:
            location = f"file={file_path},line={error.get('line', 1)}"
            if 'column' in error:
                location += f",col={error['column']}"
            print(f"::error {location}::{error['message']}")


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the check CLI."""
    parser = argparse.ArgumentParser(
        description='Validate YAML/JSON data files against a fluent_validator schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to check (default: current directory)',
    )
    parser.add_argument(
        '--schema',
        required=True,
        help="Schema reference as 'package.module:attribute'",
    )
    parser.add_argument(
        '--format',
        choices=list(OUTPUT_FORMATS),
        default=validator_config.output_format,
        help=f'Output format (default: {validator_config.output_format})',
    )

    args = parser.parse_args(argv)

    if not args.paths:
        args.paths = ['.']

    try:
        schema = resolve_schema_reference(args.schema)
    except SchemaReferenceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    data_files = find_data_files(args.paths)

    if not data_files:
        print("No YAML or JSON data files found.", file=sys.stderr)
        sys.exit(1)

    results = check_files(data_files, schema)

    if args.format == 'json':
        _print_json(results)
    elif args.format == 'github-actions':
        _print_github_actions(results)
    else:  # human-readable
        _print_human(results)

    # Exit with error code if any file failed
    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print(f"Checked {len(results)} file(s) with no errors.")
    sys.exit(0)


def cli() -> None:
    """Console-script entry point: configure logging, then run :func:`main`."""
    validator_config.set_logging()
    main()


if __name__ == '__main__':
    cli()

# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""
Command line entry point.

Usage:
    python -m aws_resource_schemas synth stack.yaml --environment production
    python -m aws_resource_schemas synth stack.json --output main.tf.json
    python -m aws_resource_schemas list-types

A manifest is a YAML or JSON document of the form::

    resources:
      - type: aws_vpc
        name: main
        attributes:
          cidr_block: 10.0.0.0/16
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import yaml

from .config import settings
from .services.registry import UnknownResourceTypeError, supported_resource_types
from .services.synthesizer import DuplicateResourceError, TerraformSynthesizer
from .utils.environment_defaults import ENVIRONMENTS
from .utils.input_validation import AttributeValidationError

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """Raised when a manifest cannot be read or has the wrong shape."""


def configure_logging(log_level: str) -> None:
    """
    Configure logging for the command line.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def load_manifest(path: Path) -> list[dict[str, Any]]:
    """
    Read a manifest file and return its resource entries.

    ``.json`` files are parsed as JSON, anything else as YAML.

    Raises:
        ManifestError: If the file is unreadable or malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Cannot read manifest {path}: {e.strerror}") from e

    try:
        if path.suffix == ".json":
            document = json.loads(text)
        else:
            document = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ManifestError(f"Cannot parse manifest {path}: {e}") from e

    if not isinstance(document, dict) or not isinstance(document.get("resources"), list):
        raise ManifestError(f"Manifest {path} must contain a 'resources' list")

    entries = document["resources"]
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ManifestError(f"resources[{index}] must be a mapping")
        for key in ("type", "name"):
            if not isinstance(entry.get(key), str) or not entry[key]:
                raise ManifestError(f"resources[{index}] needs a non-empty '{key}'")
        if not isinstance(entry.get("attributes", {}), dict):
            raise ManifestError(f"resources[{index}].attributes must be a mapping")
    return entries


def synth(manifest: Path, environment: Optional[str], output: Optional[Path]) -> None:
    """Declare every manifest resource and write the Terraform JSON."""
    entries = load_manifest(manifest)
    synthesizer = TerraformSynthesizer(environment=environment)

    for entry in entries:
        synthesizer.declare(entry["type"], entry["name"], entry.get("attributes") or {})

    document = synthesizer.to_json()
    if output is None:
        print(document)
    else:
        output.write_text(document + "\n", encoding="utf-8")
        logger.info(f"Wrote {synthesizer.resource_count} resources to {output}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aws_resource_schemas",
        description="Validate AWS resource attributes and synthesize Terraform JSON",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    synth_parser = subparsers.add_parser("synth", help="Synthesize Terraform JSON from a manifest")
    synth_parser.add_argument("manifest", type=Path, help="YAML or JSON manifest file")
    synth_parser.add_argument(
        "--environment", "-e", choices=ENVIRONMENTS, help="Environment profile (default: from settings)"
    )
    synth_parser.add_argument("--output", "-o", type=Path, help="Write to this file instead of stdout")

    subparsers.add_parser("list-types", help="List supported resource types")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(settings().log_level)

    if args.command == "list-types":
        for resource_type in supported_resource_types():
            print(resource_type)
        return 0

    try:
        synth(args.manifest, args.environment, args.output)
    except (
        AttributeValidationError,
        DuplicateResourceError,
        UnknownResourceTypeError,
        ManifestError,
        ValueError,
    ) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

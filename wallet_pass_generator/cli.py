"""
Command line entry point: render a pass description to pass.json.

Usage:
    wallet-pass-json description.json --output build/pass.json --indent 2 --validate
"""

import json
import logging
import sys
from pathlib import Path

import click
import jsonschema

from .config import load_settings
from .exceptions import PassGeneratorError
from .loader import load_request
from .schema import validate_pass_json

logger = logging.getLogger(__name__)


@click.command()
@click.argument("description", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", "output_path", type=click.Path(dir_okay=False),
              help="Where to write pass.json. Defaults to stdout.")
@click.option("--indent", type=int, default=None, help="Indent the JSON output by N spaces.")
@click.option("--validate", is_flag=True, help="Check the result against the pass.json schema.")
@click.option("--strings-dir", type=click.Path(file_okay=False),
              help="Also write <lang>.lproj/pass.strings files for each localization.")
@click.option("--env-file", type=click.Path(dir_okay=False), default=None,
              help="Load PASS_TYPE_IDENTIFIER / TEAM_IDENTIFIER / ORGANIZATION_NAME from this .env file.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def main(description, output_path, indent, validate, strings_dir, env_file, verbose):
    """Build pass.json from a JSON pass DESCRIPTION."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = load_settings(env_file)
        request = load_request(description, settings)
        pass_json = request.to_json(indent=indent)

        if validate:
            validate_pass_json(json.loads(pass_json))
            logger.info("pass.json matches the schema")

        if output_path:
            out = Path(output_path)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(pass_json, encoding="utf-8")
            logger.info(f"Saved pass to: {out}")
        else:
            click.echo(pass_json)

        if strings_dir:
            for language in request.localizations.languages():
                lproj = Path(strings_dir) / f"{language}.lproj"
                lproj.mkdir(parents=True, exist_ok=True)
                (lproj / "pass.strings").write_text(
                    request.localizations.to_strings(language), encoding="utf-8"
                )
                logger.info(f"Saved localization to: {lproj / 'pass.strings'}")

    except jsonschema.ValidationError as e:
        logger.error(f"Validation Error: {e.message}")
        sys.exit(2)
    except PassGeneratorError as e:
        logger.error(f"Pass Error: {e}")
        sys.exit(2)
    except OSError as e:
        logger.error(f"File Error: {e}")
        sys.exit(3)


if __name__ == "__main__":
    main()

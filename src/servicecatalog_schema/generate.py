"""
Service Catalog schema generator CLI

Usage: servicecatalog-generate-schema [validation]

Prints the JSON schema of the Service Catalog API types to stdout. The
per-kind "resources" section is only kept when the first argument is
"validation".
"""

import json
import sys

from .common import fatal, logger
from .registry import PACKAGES, TYPE_MAP, Schema
from .schemagen import JSONSchema, SchemaGenerationError, generate_schema

VALIDATION_ARGUMENT = "validation"


def wants_validation(args) -> bool:
    return len(args) > 0 and args[0] == VALIDATION_ARGUMENT


def render_schema(schema: JSONSchema, validation: bool = False) -> str:
    """Serialize a generated schema the way downstream model generators expect it.

    The map value facet serializes as "additionalProperty" and is renamed to
    "additionalProperties" here, before the document is indented.
    """
    if not validation:
        schema.resources = None

    result = schema.model_dump_json(by_alias=True, exclude_none=True)
    result = result.replace('"additionalProperty":', '"additionalProperties":')
    return json.dumps(json.loads(result), indent=2, sort_keys=True)


def main(argv=None, generator=generate_schema):
    args = sys.argv[1:] if argv is None else list(argv)
    validation = wants_validation(args)

    try:
        schema = generator(Schema, PACKAGES, TYPE_MAP)
    except SchemaGenerationError as e:
        fatal(f"Schema generation failed: {e}", exc_info=e)
    except Exception as e:
        fatal(f"Schema generation failed unexpectedly: {e}", exc_info=e)

    try:
        output = render_schema(schema, validation)
    except (TypeError, ValueError) as e:
        fatal(f"Could not serialize the schema: {e}", exc_info=e)

    logger().debug(f"Writing schema ({'with' if validation else 'without'} resources)")
    print(output)


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
Schema Generator CLI for the Service Catalog API types

Prints the JSON schema of the Service Catalog kinds to stdout. Pass
"validation" as the first argument to keep the per-kind resources section.
"""

from servicecatalog_schema.generate import main

if __name__ == '__main__':
    main()

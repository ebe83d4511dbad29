from .descriptors import JSONObjectDescriptor, JSONPropertyDescriptor, JSONSchema, PackageDescriptor
from .generator import SchemaGenerationError, SchemaGenerator, generate_schema

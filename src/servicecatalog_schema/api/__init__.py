from dataclasses import MISSING, field


def json_field(name=None, description=None, inline=False, default=MISSING, default_factory=MISSING):
    """Declare a dataclass field together with its wire metadata.

    ``name`` is the JSON property name (the attribute name when omitted, ``"-"``
    to skip the field), ``inline`` merges the field's own properties into the
    enclosing type. Fields without an explicit default get ``None``.
    """
    metadata = {}
    if name is not None:
        metadata['json'] = name
    if description is not None:
        metadata['description'] = description
    if inline:
        metadata['inline'] = True
    if default is MISSING and default_factory is MISSING:
        default = None
    return field(default=default, default_factory=default_factory, metadata=metadata)

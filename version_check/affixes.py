"""Prefix/suffix handling for conventional version names.

Pure string slicing, no validation: callers check that a name actually
carries its affixes before stripping.
"""


def strip_affixes(name: str, prefix: str, suffix: str) -> str:
    """Remove prefix from the start, then suffix from the end.

    Empty affixes are left alone. Names shorter than their affixes yield
    an empty string rather than an error.
    """
    if prefix:
        name = name[len(prefix):]
    if suffix:
        name = name[:-len(suffix)]
    return name
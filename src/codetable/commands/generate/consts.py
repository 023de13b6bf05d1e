"""Code table generation constants."""

from pathlib import Path

TABLE_URL = "https://raw.githubusercontent.com/multiformats/multicodec/HEAD/table.csv"

OUTPUT_PATH = Path("code_table.go")

PACKAGE_NAME = "multicodec"

# Seconds. Only guards against a hung connection; there are no retries.
FETCH_TIMEOUT = 10

# Name, tag, code, status, description
MIN_FIELDS = 5

PREAMBLE_TEMPLATE = """\
// Code generated by codetable; DO NOT EDIT.

package {package}

const ("""

ENTRY_TEMPLATE = """
// {deprecated_prefix}{var_name} is a {status} code tagged "{tag}"{description_suffix}.
{var_name} Code = {code} // {name}
"""

POSTAMBLE = ")\n"

DEPRECATED_PREFIX = "Deprecated: "

DESCRIPTION_SUFFIX_TEMPLATE = " and described by: {description}"

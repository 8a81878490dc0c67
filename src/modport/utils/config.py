"""
Configuration constants to replace magic strings throughout modport
"""

# Parser configuration constants (cache under temp dir to avoid cluttering project root)
import os
import tempfile
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "modport_specifiers.cache")

# Comment markers
LINE_COMMENT_MARKER = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
LINE_TERMINATORS = "\r\n"

# Import declaration keywords and punctuation
IMPORT_KEYWORD = "import"
FROM_KEYWORD = "from"
AS_KEYWORD = "as"
NAMESPACE_MARKER = "*"
STRING_QUOTE_CHAR = '"'
STATEMENT_TERMINATOR = ";"
SPECIFIER_SEPARATOR = ", "

# Emitted text
NODE_SEPARATOR = "\n"
EMITTED_COMMENT_PREFIX = "// "

# Error codes
ERROR_UNRECOGNIZED_INPUT = "E0101"
ERROR_UNRENDERABLE_NODE = "E0201"
ERROR_UNSUPPORTED_LANGUAGE = "E0301"

# Display and formatting constants
ERROR_EXCERPT_CHARS = 40   # Characters of input shown after an unrecognized position
COLOR_ENV_VAR = "MODPORT_COLOR"

"""Export configuration settings.

Values are read from the environment, optionally seeded from a .env file
at the project root.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# =============================================================================
# Output Configuration
# =============================================================================

# Format used when a caller does not name one
DEFAULT_OUTPUT_FORMAT = os.getenv("DEFAULT_OUTPUT_FORMAT", "json")

# Spaces per nesting level in both JSON and XML output
OUTPUT_INDENT = int(os.getenv("OUTPUT_INDENT", "2"))

# Byte encoding of the serialized text
OUTPUT_ENCODING = os.getenv("OUTPUT_ENCODING", "utf-8")

# XML line ending; fixed here rather than taken from the host platform
LINE_DELIMITERS = {"lf": "\n", "crlf": "\r\n"}
XML_LINE_ENDING = os.getenv("XML_LINE_ENDING", "lf").lower()
if XML_LINE_ENDING not in LINE_DELIMITERS:
    raise ValueError(
        f"XML_LINE_ENDING must be one of {sorted(LINE_DELIMITERS)}, got {XML_LINE_ENDING!r}"
    )
XML_LINE_DELIMITER = LINE_DELIMITERS[XML_LINE_ENDING]

"""Constants for the Gherkin Builder."""

# Step annotations recognized at the start of a trimmed line
STEP_KEYWORDS = ("@Given", "@When", "@Then")

# Parameter annotations whose arguments carry no type information
PARAMETER_MARKERS = ("@Transform", "@Delimiter")

IMPORT_PREFIX = "import "

# Phrase placeholders
ANY_MARKER = "<span class='any'>...</span>"
CAPTURE_PLACEHOLDER = "XXXX"
OPTIONAL_TEMPLATE = "<span class='opt'>{}</span>"

LIST_SUFFIX = "List"

CONFIG_FILENAME = "gherkin-builder.toml"
DEFAULT_SUFFIXES = (".java",)

"""
Filesystem naming constants for the plugin and generator.

Centralizes path and name definitions to avoid magic strings in individual modules.
"""

# Font file suffixes accepted as generator input
FONT_EXTENSIONS = (".ttf", ".otf")

# Generated enum
ENUM_NAME = "AppFont"

# Output layout: <workdir>/<target>/Generated/<target>GeneratedFonts.<ext>
GENERATED_DIR_NAME = "Generated"
OUTPUT_FILE_SUFFIX = "GeneratedFonts"

# Companion executable invoked by the plugin
GENERATOR_TOOL_NAME = "fontenum-generator"

DISPLAY_NAME_TEMPLATE = "Generating Font Definitions For {target}"

# Command line recorded next to each output for up-to-date checks
STAMP_FILE_SUFFIX = ".cmdline"

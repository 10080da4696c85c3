# topmark:header:start
#
#   project      : EnumExtender
#   file         : __init__.py
#   file_relpath : src/enumextender/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EnumExtender CLI subcommands."""

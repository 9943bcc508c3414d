"""Interactive request file creation."""

from .prompter import parse_bool, parse_path, parse_string, prompt, prompt_for_options
from .response_file import RESPONSE_FILE_NAME, build_bundle_command, write_response_file

__all__ = [
    "RESPONSE_FILE_NAME",
    "build_bundle_command",
    "parse_bool",
    "parse_path",
    "parse_string",
    "prompt",
    "prompt_for_options",
    "write_response_file",
]

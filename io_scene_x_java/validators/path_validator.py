# Relative path: io_scene_x_java/validators/path_validator.py
# Purpose: Output path validation, run before anything is written
# Rules:
#   - the path is a non-empty string naming a file, not a directory
#   - the parent directory exists and is writable
#   - the extension matches the exporter's (when one is required)

import os


def validate_output_path(path: str, required_ext: str = None) -> bool:
    """
    Check that an export file path can be written:
    - parent directory exists and is writable
    - extension matches (if required)
    """
    if not path or not isinstance(path, str):
        raise ValueError("Invalid output path: must be a non-empty string")

    if os.path.isdir(path):
        raise ValueError(f"Output path is a directory: {path}")

    parent = os.path.dirname(os.path.abspath(path))
    if not os.path.exists(parent):
        raise ValueError(f"Output directory does not exist: {parent}")

    if not os.access(parent, os.W_OK):
        raise PermissionError(f"Output directory is not writable: {parent}")

    if required_ext and not path.lower().endswith(required_ext.lower()):
        raise ValueError(f"Output file extension must be {required_ext}")

    return True

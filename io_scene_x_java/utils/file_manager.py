# File: utils/file_manager.py
# Purpose: File naming helpers shared by both exporters
# Notes:
# - Texture files are written next to the output file and named by
#   concatenating the output path and the texture's base name
# - Host texture filenames may carry Windows separators

import os
import re


class FileManager:
    """
    File manager

    Path and naming helpers used by the exporters
    """

    @staticmethod
    def ensure_directory(file_path: str) -> None:
        directory = os.path.dirname(file_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)

    @staticmethod
    def base_name(path: str) -> str:
        """
        Last path component, accepting both '/' and '\\' separators
        """
        return re.split(r"[\\/]", path or "")[-1]

    @staticmethod
    def get_file_name_without_extension(file_path: str) -> str:
        return FileManager.base_name(file_path).split(".")[0]

    @staticmethod
    def texture_output_path(output_path: str, texture_filename: str) -> str:
        """
        '/out/truck.x' + 'C:\\tex\\wood.jpg' -> '/out/truck.xwood.jpg'
        """
        return output_path + FileManager.base_name(texture_filename)

    @staticmethod
    def texture_reference(output_path: str, texture_filename: str) -> str:
        """
        File name written into TextureFilename blocks (relative to the .x file)
        """
        return FileManager.base_name(output_path) + FileManager.base_name(texture_filename)

    @staticmethod
    def model_name(model_path: str, default: str) -> str:
        """Model file base name without extension, or default for unsaved models"""
        name = FileManager.get_file_name_without_extension(model_path)
        return name if name else default

    @staticmethod
    def audit_log_path(output_path: str, ext: str) -> str:
        return os.path.splitext(output_path)[0] + ext

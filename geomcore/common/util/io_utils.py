import hjson
import json
import os
from typing import Any, Callable


class IOUtils:
    """
    static class for IO-related utility functions.
    """

    def __init__(self):
        raise RuntimeError(f"{__class__.__name__} is not meant to be instantiated.")

    @staticmethod
    def file_exists(
        filepath: str,
        on_error_for_user: Callable[[str], Any],
        on_error_for_dev: Callable[[str], Any]
    ) -> bool:
        """
        :param filepath: Configuration file to check
        :param on_error_for_user: Receives a short message suitable for showing to whoever supplied the file.
        :param on_error_for_dev: Receives a message naming the path and the failure, for logs.
        :return: True if filepath names an existing regular file, otherwise False.
        """
        if not os.path.exists(filepath):
            on_error_for_user("Configuration file does not exist.")
            on_error_for_dev(f"No file or directory at {filepath}.")
            return False
        if not os.path.isfile(filepath):
            on_error_for_user(
                "Filepath location exists but is not a file. "
                "Most likely a directory exists at that location.")
            on_error_for_dev(f"Specified filepath location {filepath} exists but is not a file.")
            return False
        return True

    @staticmethod
    def hjson_read(
        filepath: str,
        on_error_for_user: Callable[[str], Any],
        on_error_for_dev: Callable[[str], Any]
    ) -> dict | None:
        """
        :return: Dictionary representing the (h)json data if successful, otherwise None
        """
        if not IOUtils.file_exists(
            filepath=filepath,
            on_error_for_user=on_error_for_user,
            on_error_for_dev=on_error_for_dev
        ):
            return None
        json_dict: dict
        try:
            with open(filepath, 'r', encoding='utf-8') as input_file:
                json_dict = hjson.load(input_file)
        except OSError as e:
            on_error_for_user("An unexpected file I/O error happened while reading a file.")
            on_error_for_dev(str(e))
            return None
        except hjson.HjsonDecodeError as e:
            on_error_for_user("The file contents could not be parsed.")
            on_error_for_dev(str(e))
            return None
        if not isinstance(json_dict, dict):
            on_error_for_user("The file contents are not a key-value structure.")
            on_error_for_dev(f"Expected a dict at the top level of {filepath}, got {type(json_dict).__name__}.")
            return None
        return dict(json_dict)

    @staticmethod
    def json_write(
        filepath: str,
        json_dict: dict,
        on_error_for_user: Callable[[str], Any],
        on_error_for_dev: Callable[[str], Any],
        indent: int = 4
    ) -> bool:
        """
        :return: True if the file was written, otherwise False.
        """
        path = os.path.dirname(filepath)
        if len(path) > 0:
            os.makedirs(name=path, exist_ok=True)
        try:
            with open(filepath, 'w', encoding='utf-8') as output_file:
                json.dump(json_dict, output_file, sort_keys=False, indent=indent)
        except OSError as e:
            on_error_for_user("An unexpected file I/O error happened while writing a file.")
            on_error_for_dev(str(e))
            return False
        return True

# cli/path_utils.py

import os


def resolve_data_file(user_input: str | None, default_path: str) -> str:
    """
    Resolves the roster data file from an optional user-supplied path.

    Args:
        user_input (str | None): A path from the command line. If None or blank, `default_path` is used.
        default_path (str): The configured default data file.

    Returns:
        An absolute path to a .json file. If the input names an existing directory, `roster.json`
        inside that directory is used.

    Notes:
        - `~` is expanded and relative paths are resolved against the current working directory.
        - The parent directory is created if it does not exist.
    """
    raw = user_input.strip() if user_input and user_input.strip() else default_path
    path = os.path.abspath(os.path.expanduser(raw))

    if os.path.isdir(path):
        path = os.path.join(path, "roster.json")

    os.makedirs(os.path.dirname(path), exist_ok=True)

    return path

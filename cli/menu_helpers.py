# cli/menu_helpers.py

"""
Helper functions for console input and output in the Roster Manager shell.

This module provides utilities for:
- Prompting for user input and yes/no confirmation
- Displaying numbered result lists
- Displaying standard system messages and error feedback
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import Response


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a one-based index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === user input methods ===
#
# `prompt_user_input()` strips surrounding whitespace from the response.
# `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_command() -> str:
    return input("\n  >> ").strip()


# === system messages ===


def display_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title)}")


def display_response_success(response: Response) -> None:
    if response.success and response.detail:
        print(f"\n{response.detail}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")

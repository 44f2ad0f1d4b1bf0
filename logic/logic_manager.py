# logic/logic_manager.py

"""
Executes one line of user input against the `Model` and reports the outcome as a `Response`.

This is the single point where parse and command errors are turned into user-facing failures.
The triggering command is abandoned, the roster is left unchanged, and the program keeps running.
The roster is saved after every command that changed it.
"""

from __future__ import annotations

from core.exceptions import CommandError, ParseError
from core.logger import get_logger
from core.response import ErrorCode, Response
from logic.parser.roster_parser import parse_command
from models.model import Model
from models.person import Person

logger = get_logger()


class LogicManager:

    def __init__(self, model: Model, data_file: str | None = None):
        self._model = model
        self._data_file = data_file

    @property
    def model(self) -> Model:
        return self._model

    @property
    def filtered_persons(self) -> list[Person]:
        return self._model.filtered_persons

    def execute(self, command_text: str) -> Response:
        """
        Parses and executes a single command.

        Args:
            command_text (str): The raw line entered by the user.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the command was parsed and executed.
                - detail (str | None): The command feedback on success, or the error message on failure.
                - error (ErrorCode | None):
                    - `ErrorCode.INVALID_INPUT` if the input could not be parsed.
                    - `ErrorCode.VALIDATION_FAILED` if the command could not be applied to the roster.
                    - `ErrorCode.INTERNAL_ERROR` if saving failed or for unexpected errors.
                - data (dict): On success, "result" (CommandResult): the command's result.

        Notes:
            - A command that succeeded but could not be saved is reported as a failure, with the
              result still attached under "result"; the in-memory change is kept.
        """
        logger.info(f"Command entered: {command_text!r}")

        try:
            command = parse_command(command_text)
            result = command.execute(self._model)

        except ParseError as e:
            logger.info(f"Rejected input: {e}")
            return Response.fail(detail=str(e), error=ErrorCode.INVALID_INPUT)

        except CommandError as e:
            logger.info(f"Command failed: {e}")
            return Response.fail(detail=str(e), error=ErrorCode.VALIDATION_FAILED)

        except Exception as e:
            logger.error(f"Unexpected error executing {command_text!r}: {e}", exc_info=True)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        if result.mutated and self._data_file is not None:
            save_response = self._model.roster.save(self._data_file)

            if not save_response.success:
                return Response.fail(
                    detail=f"{result.feedback}\n{save_response.detail}",
                    error=save_response.error,
                    data={"result": result},
                )

        return Response.succeed(detail=result.feedback, data={"result": result})

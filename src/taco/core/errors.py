"""Structured errors for taco operations.

Every failure surfaced to the user is a TacoError carrying a TacoErrorCode
plus the contextual values (paths, offending inputs) used to render its
message. The CLI error boundary prints the message and exits non-zero.
"""

from enum import Enum


class TacoErrorCode(Enum):
    """Error codes for all surfaced taco failures."""

    INVALID_KIT = "InvalidKit"
    INVALID_VERSION = "InvalidVersion"
    MANIFEST_NOT_FOUND = "ManifestNotFound"
    MANIFEST_PARSE_ERROR = "ManifestParseError"
    FAILED_FILE_READ = "FailedFileRead"
    FAILED_FILE_WRITE = "FailedFileWrite"
    FAILED_RECURSIVE_COPY = "FailedRecursiveCopy"
    UNEXPECTED_PLATFORM = "UnexpectedPlatform"
    KIT_METADATA_FILE_MALFORMED = "KitMetadataFileMalformed"
    COMMAND_FAILED = "CommandFailed"
    INVALID_APP_NAME = "InvalidAppName"
    INVALID_PROJECT_PATH = "InvalidProjectPath"
    PROJECT_PATH_NOT_EMPTY = "ProjectPathNotEmpty"
    KIT_SELECT_ARGS_CONFLICT = "KitSelectArgsConflict"
    KIT_SELECT_MISSING_TARGET = "KitSelectMissingTarget"


_MESSAGES: dict[TacoErrorCode, str] = {
    TacoErrorCode.INVALID_KIT: "Invalid kit '{0}'. Run 'taco kit list' to see available kits",
    TacoErrorCode.INVALID_VERSION: "Invalid Cordova CLI version '{0}'",
    TacoErrorCode.MANIFEST_NOT_FOUND: "No taco.json found at {0}",
    TacoErrorCode.MANIFEST_PARSE_ERROR: "Could not parse {0}: {1}",
    TacoErrorCode.FAILED_FILE_READ: "Failed to read file {0}",
    TacoErrorCode.FAILED_FILE_WRITE: "Failed to write file {0}",
    TacoErrorCode.FAILED_RECURSIVE_COPY: "Failed to copy {0} to {1}",
    TacoErrorCode.UNEXPECTED_PLATFORM: "Unexpected platform '{0}'",
    TacoErrorCode.KIT_METADATA_FILE_MALFORMED: "Kit metadata file {0} is malformed: {1}",
    TacoErrorCode.COMMAND_FAILED: "Command failed with exit code {1}: {0}",
    TacoErrorCode.INVALID_APP_NAME: (
        "Invalid app name '{0}'. App names must not contain control characters or any of: {1}"
    ),
    TacoErrorCode.INVALID_PROJECT_PATH: "Invalid project path '{0}'",
    TacoErrorCode.PROJECT_PATH_NOT_EMPTY: "Project path {0} already exists and is not empty",
    TacoErrorCode.KIT_SELECT_ARGS_CONFLICT: "Specify either --kit or --cordova, not both",
    TacoErrorCode.KIT_SELECT_MISSING_TARGET: "Specify a target with --kit or --cordova",
}


class TacoError(Exception):
    """Error with a code and the values needed to describe it.

    Attributes:
        error_code: Which failure occurred
        args_for_message: Contextual values (paths, offending inputs)
        inner: The underlying exception, when this error wraps one
    """

    def __init__(
        self,
        error_code: TacoErrorCode,
        *args: object,
        inner: BaseException | None = None,
    ) -> None:
        self.error_code = error_code
        self.args_for_message = args
        self.inner = inner
        super().__init__(self._render())

    def _render(self) -> str:
        template = _MESSAGES[self.error_code]
        message = template.format(*(str(a) for a in self.args_for_message))
        if self.inner is not None:
            message += f" ({self.inner})"
        return message

    @classmethod
    def wrap(cls, error_code: TacoErrorCode, inner: BaseException, *args: object) -> "TacoError":
        """Create a TacoError that records the exception it replaces."""
        error = cls(error_code, *args, inner=inner)
        error.__cause__ = inner
        return error

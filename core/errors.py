"""Pipeline error taxonomy."""


class PipelineError(Exception):
    """Base class for every error that aborts a pipeline run."""

    def __init__(self, message, stage=None):
        super().__init__(message)
        self.stage = stage


class InputValidationError(PipelineError, ValueError):
    """A required input field is missing or empty."""


class PrerequisiteError(PipelineError):
    """A previous stage did not report success."""


class ConfigurationError(PipelineError, RuntimeError):
    """Required configuration (usually a credential) is missing."""


class RemoteError(PipelineError):
    """The hosting API answered with a non-success status."""

    def __init__(self, message, stage=None, status_code=None):
        super().__init__(message, stage=stage)
        self.status_code = status_code

class DeploymentError(Exception):
    """Base class for every failure of the deployment procedure."""


class NoSignerError(DeploymentError):
    pass


class FactoryNotFoundError(DeploymentError):
    pass


class SubmissionError(DeploymentError):
    """The creation transaction could not be sent."""


class ConfirmationError(DeploymentError):
    """The creation transaction was sent but never confirmed as successful."""

class ApiBuilderError(Exception):
    """Base class for errors raised while building the API tree."""


class NotFoundError(ApiBuilderError):
    """The requested path has never been registered in the gateway."""


class EmptyPathError(ApiBuilderError):
    """The path has no usable segment after the root."""


class DuplicateIntegrationError(ApiBuilderError):
    """The resource already owns a function for this HTTP method."""


class UnregisteredPathError(ApiBuilderError):
    """A resource builder strategy returned without registering its path."""

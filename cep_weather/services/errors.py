class UpstreamError(RuntimeError):
    """An upstream service could not be reached or its reply could not be decoded."""


class UpstreamSchemaError(UpstreamError):
    """An upstream service answered 2xx with a body of the wrong shape."""

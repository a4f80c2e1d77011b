"""TLS settings used for connections to the API."""

import ssl


def create_ssl_context() -> ssl.SSLContext:
    """Return a verifying TLS client context that refuses anything older than TLS 1.2."""
    context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    return context
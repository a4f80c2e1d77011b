"""Resource models, enumerations, webhook handling and TLS settings for the Omise payment API."""

__version__ = "0.1.0"
"""Building blocks for a portfolio and blog content backend: models, validation, business rules, auth tokens, responses, logging, config and live view counts."""

__version__ = "0.1.0"
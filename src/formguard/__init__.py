"""formguard: collect-all validation with message code resolution."""

__version__ = "0.1.0"

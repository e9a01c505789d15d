from .admission_payloads import errors_to_loggable

__all__ = ["errors_to_loggable"]

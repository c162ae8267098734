"""
Shared helpers for the walkthrough: the package logger, project exceptions and step results.
"""

from .logger import configure_logging, set_logger, set_log_level
from .result import StepResult, WalkthroughReport
from .setup_error import SetupError
from .validation_error import ValidationError
from .document_not_found_error import DocumentNotFoundError
from .undefined import UNDEFINED, Undefined

from .assemble import assemble_locale_record
from .batch import FailurePolicy, LocaleDataSource, extract_display_names
from .errors import InvalidLocaleIdentifierError, MissingFieldError, MissingRequiredFieldError
from .io import load_locale_record, write_locale_database
from .pipeline import ExtractionRequest, prepare_display_names

__all__ = [
    "ExtractionRequest",
    "FailurePolicy",
    "InvalidLocaleIdentifierError",
    "LocaleDataSource",
    "MissingFieldError",
    "MissingRequiredFieldError",
    "assemble_locale_record",
    "extract_display_names",
    "load_locale_record",
    "prepare_display_names",
    "write_locale_database",
]

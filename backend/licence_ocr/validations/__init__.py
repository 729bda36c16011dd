from .error_codes import ErrorCode
from .gates import (
    QualityReport,
    ValidationResult,
    validate_date,
    validate_extracted_data,
    validate_id_number,
    validate_licence_number,
)

__all__ = [
    "ErrorCode",
    "QualityReport",
    "ValidationResult",
    "validate_date",
    "validate_extracted_data",
    "validate_id_number",
    "validate_licence_number",
]

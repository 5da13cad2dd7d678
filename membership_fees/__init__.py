from .calculator import FeeBreakdown, FeeCalculator, format_fee, lookup_status
from .errors import FeeLookupError, FeeTableError, MissingSelectionError, SectionNotFoundError
from .form import FormFields, form_fields, institution_type_label, institution_types
from .tables import FeeTables, TwoYearOption, load_fee_tables, read_fee_source

__all__ = [
    "FeeBreakdown",
    "FeeCalculator",
    "format_fee",
    "lookup_status",
    "FeeLookupError",
    "FeeTableError",
    "MissingSelectionError",
    "SectionNotFoundError",
    "FormFields",
    "form_fields",
    "institution_type_label",
    "institution_types",
    "FeeTables",
    "TwoYearOption",
    "load_fee_tables",
    "read_fee_source",
]

"""Pure mapping from quote summary sub-documents to flat table records."""

from .base import Record, flatten, split_keyed, to_json
from .registry import (
    MODULE_MAPPINGS,
    QUOTE_SUMMARY_MODULES,
    ModuleMapping,
    TableMapping,
    WritePolicy,
    all_table_mappings,
    get_module_mapping,
)


__all__ = [
    "MODULE_MAPPINGS",
    "QUOTE_SUMMARY_MODULES",
    "ModuleMapping",
    "Record",
    "TableMapping",
    "WritePolicy",
    "all_table_mappings",
    "flatten",
    "get_module_mapping",
    "split_keyed",
    "to_json",
]

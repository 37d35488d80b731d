"""
Translation Filter - Per-field search criteria for translation records
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field

from .locale import Locale


class SearchType(str, Enum):
    """How a field value is compared with the filter value"""
    CONTAINS = "contains"
    BEGINS_WITH = "begins_with"
    ENDS_WITH = "ends_with"
    EQUALS = "equals"


DEFAULT_SEARCH_TYPE = SearchType.CONTAINS


class FieldFilter(BaseModel):
    """Criteria for a single record field"""

    value: Optional[str] = Field(default=None, description="Text to look for; blank matches everything")
    search_type: SearchType = Field(default=DEFAULT_SEARCH_TYPE, description="Comparison mode")
    case_sensitive: bool = Field(default=False, description="Exact case comparison")

    @property
    def is_active(self) -> bool:
        """A blank value (None, empty or whitespace only) disables the filter"""
        return bool(self.value and self.value.strip())


class TranslationFilter(BaseModel):
    """
    Search filter over translation records.

    One FieldFilter per queryable field plus two global settings. A global
    setting left at its default does nothing; otherwise it replaces the
    setting of every field filter that still uses the default.
    """

    key: FieldFilter = Field(default_factory=FieldFilter, description="Resource key")
    group: FieldFilter = Field(default_factory=FieldFilter, description="Resource group")
    fr: FieldFilter = Field(default_factory=FieldFilter, description="French text")
    en: FieldFilter = Field(default_factory=FieldFilter, description="English text")
    pt: FieldFilter = Field(default_factory=FieldFilter, description="Portuguese text")

    global_case_sensitive: bool = Field(default=False, description="Force case-sensitive search")
    global_search_type: SearchType = Field(default=DEFAULT_SEARCH_TYPE, description="Search type for every field")

    class Config:
        json_schema_extra = {
            "example": {
                "key": {"value": "Menu_", "search_type": "begins_with"},
                "en": {"value": "save"},
                "global_case_sensitive": False,
                "global_search_type": "contains"
            }
        }

    def field_filters(self) -> Dict[str, FieldFilter]:
        """Field name -> filter, in a fixed order"""
        return {
            "key": self.key,
            "group": self.group,
            Locale.FR.value: self.fr,
            Locale.EN.value: self.en,
            Locale.PT.value: self.pt,
        }

    def is_empty(self) -> bool:
        """True when no field carries a search value"""
        return not any(f.is_active for f in self.field_filters().values())

    def resolved(self) -> "TranslationFilter":
        """Copy of the filter with the global settings pushed into each field"""
        updates = {}
        for name, field_filter in self.field_filters().items():
            changes = {}
            if self.global_case_sensitive and not field_filter.case_sensitive:
                changes["case_sensitive"] = True
            if (
                self.global_search_type != DEFAULT_SEARCH_TYPE
                and field_filter.search_type == DEFAULT_SEARCH_TYPE
            ):
                changes["search_type"] = self.global_search_type
            if changes:
                updates[name] = field_filter.model_copy(update=changes)
        return self.model_copy(update=updates)

    @classmethod
    def simple(
        cls,
        search_type: SearchType = DEFAULT_SEARCH_TYPE,
        case_sensitive: bool = False,
        **values: Optional[str]
    ) -> "TranslationFilter":
        """
        Build a filter from plain field values.

        Example:
            TranslationFilter.simple(key="Menu_", en="Save",
                                     search_type=SearchType.BEGINS_WITH)
        """
        fields = {
            name: FieldFilter(value=value, search_type=search_type, case_sensitive=case_sensitive)
            for name, value in values.items()
        }
        return cls(**fields)

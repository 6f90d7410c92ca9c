"""
Wire-level rules for the lifecycle Transition element.

Element names match the S3 lifecycle schema; lookups are by local name so a
namespaced document decodes the same as a bare one.
"""

TRANSITION_ELEMENT = "Transition"
DAYS_ELEMENT = "Days"
DATE_ELEMENT = "Date"
STORAGE_CLASS_ELEMENT = "StorageClass"

# Dates are always midnight UTC; rendered as YYYY-MM-DD + this suffix
MIDNIGHT_UTC_SUFFIX = "T00:00:00Z"

XML_ENCODING = "utf-8"

MSG_NOT_WELL_FORMED = (
    "The XML you provided was not well-formed or did not validate "
    "against our published schema"
)
MSG_INVALID_DAYS = "Days must be 0 or greater when used with Transition"
MSG_INVALID_DATE = "Date must be provided in ISO 8601 format"
MSG_DATE_NOT_MIDNIGHT = "'Date' must be at midnight GMT"
MSG_CONFLICTING = (
    "Exactly one of Days (0 or greater) or Date (positive ISO 8601 format) "
    "should be present inside Transition."
)

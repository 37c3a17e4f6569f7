"""
Default settings. Override them by pointing the environment variable
DLMS_ENUMS_SETTINGS_MODULE to a module with the ALL_CAPS settings to change.
"""

# Separates the entries of a bit-flag enumeration in text form.
FLAG_SEPARATOR = ","

# Text of the empty set for bit-flag enumerations that has no entry with code 0.
FLAG_ZERO_SPELLING = "None"

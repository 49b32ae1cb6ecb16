"""
Configuration & Global Constants
================================
This module serves as the central registry for tolerances and the layout of
the DIALux furnishing records.

Why is this file needed?
------------------------
1. Consistency: Geometry checks (plane distance, corner detection) and
   rounding all read the same tolerances instead of scattering literals.
2. Record Layout: The reverse conversion consumes ordered text fields. The
   positions and labels of those fields are defined here once.

Exports:
    DISTANCE_TOLERANCE (float): Distance below which two points coincide [m].
    ROUNDING_DECIMALS (int): Decimals kept for furnishing width/height.
    RECORD_FIELD_COUNT (int): Minimum number of fields in a furnishing record.
"""

# Geometry
DISTANCE_TOLERANCE: float = 1e-6
ROUNDING_DECIMALS: int = 3

# Furnishing record layout (0-indexed positions of the exported text fields)
TYPE_FIELD: int = 0
REFERENCE_FIELD: int = 1
ROTATION_FIELD: int = 2
POSITION_FIELD: int = 3
SIZE_FIELD: int = 4
RECORD_FIELD_COUNT: int = 5

# Labels written in front of the '=' of each field
TYPE_LABEL: str = "Type"
REFERENCE_LABEL: str = "Ref"
ROTATION_LABEL: str = "Rot"
POSITION_LABEL: str = "Pos"
SIZE_LABEL: str = "Size"

# Logging (the environment variable overrides the default; the CLI overrides both)
LOG_LEVEL_ENV: str = "DIALUXADAPTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL: str = "INFO"

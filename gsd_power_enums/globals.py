VERSION = "1.0.0"

# C type names of the groups written by gsd-power-enums-update, in output order
DEFAULT_FLAGS_TYPE = "GsdPowerInhibitorFlag"
DEFAULT_ENUM_TYPE = "GsdPowerPresenceStatus"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1

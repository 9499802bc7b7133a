from enum import IntEnum, IntFlag


class InhibitorFlag(IntFlag):
    GSD_POWER_INHIBITOR_LOGOUT = 1 << 0
    GSD_POWER_INHIBITOR_SWITCH_USER = 1 << 1
    GSD_POWER_INHIBITOR_SUSPEND = 1 << 2
    GSD_POWER_INHIBITOR_IDLE = 1 << 3
    GSD_POWER_INHIBITOR_AUTOMOUNT = 1 << 4


class PresenceStatus(IntEnum):
    GSD_POWER_PRESENCE_STATUS_AVAILABLE = 0
    GSD_POWER_PRESENCE_STATUS_INVISIBLE = 1
    GSD_POWER_PRESENCE_STATUS_BUSY = 2
    GSD_POWER_PRESENCE_STATUS_IDLE = 3

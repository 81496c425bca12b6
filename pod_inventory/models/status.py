"""
Resource state and health enumerations.

Values are the strings used on the wire, so a member compares equal
to its serialized form (State.ENABLED == "Enabled").
"""

from enum import Enum


class State(str, Enum):
    """Resource lifecycle state"""
    ENABLED = "Enabled"
    DISABLED = "Disabled"
    OFFLINE = "Offline"
    IN_TEST = "InTest"
    STARTING = "Starting"
    ABSENT = "Absent"
    STANDBY_OFFLINE = "StandbyOffline"
    STANDBY_SPARE = "StandbySpare"
    UNAVAILABLE_OFFLINE = "UnavailableOffline"
    DEFERRING = "Deferring"
    QUIESCED = "Quiesced"
    UPDATING = "Updating"


class Health(str, Enum):
    """Resource health status"""
    OK = "OK"
    WARNING = "Warning"
    CRITICAL = "Critical"

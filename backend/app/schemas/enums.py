from enum import Enum

class PopulateStateEnum(str, Enum):
    idle = "idle"
    running = "running"
    succeeded = "succeeded"
    failed = "failed"

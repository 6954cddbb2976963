from .step_10_permission_gate import PermissionGateStep
from .step_20_load_config import LoadConfigStep
from .step_30_parse_sources import ParseSourcesStep
from .step_40_resolve_url import ResolveUrlStep
from .step_50_fetch_to_target import FetchToTargetStep
from .step_60_mark_executable import MarkExecutableStep
from .step_70_remove_target import RemoveTargetStep

__all__ = [
    "PermissionGateStep",
    "LoadConfigStep",
    "ParseSourcesStep",
    "ResolveUrlStep",
    "FetchToTargetStep",
    "MarkExecutableStep",
    "RemoveTargetStep",
]

from openx_core.actions.aliases import AliasActions
from openx_core.actions.batch import aggregate_results
from openx_core.actions.close import CloseActions
from openx_core.actions.doctor import DoctorActions
from openx_core.actions.launch import LaunchActions

__all__ = [
    "AliasActions",
    "CloseActions",
    "DoctorActions",
    "LaunchActions",
    "aggregate_results",
]

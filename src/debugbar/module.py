from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class DebugModule:
    """Declaration of the debug toolbar module.

    ``controller_namespace`` is the package searched for request handlers and
    ``panels`` maps panel ids to their configuration.
    """

    controller_namespace: str = "debugbar.controllers"
    panels: Optional[Dict[str, Any]] = None

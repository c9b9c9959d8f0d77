"""Check registration in execution order."""

from typing import Any, Dict, List, Tuple, Type
from .base import Check
from ci_preflight.exceptions import CheckRegistrationError

# Internal registry: (check_id, check_cls, defaults), in registration order
_REGISTRY: List[Tuple[str, Type[Check], Dict[str, Any]]] = []


def register(*, check_id: str = None, **default_params):
    """Decorator to register a check. Registration order is execution order."""

    def _decorator(check_cls: Type[Check]):
        cid = check_id or check_cls.check_id or check_cls.__name__
        if any(existing == cid for existing, _, _ in _REGISTRY):
            raise CheckRegistrationError(f"Check '{cid}' is already registered")
        _REGISTRY.append((cid, check_cls, dict(default_params)))
        return check_cls

    return _decorator


def registered_checks() -> List[Check]:
    """Instantiate all registered checks in execution order."""
    return [cls(cid, **params) for cid, cls, params in _REGISTRY]


def list_registered() -> List[Dict[str, Any]]:
    """List all registered checks."""
    return [
        {
            "check_id": cid,
            "name": cls.name,
            "class": cls.__name__,
            "params": params,
        }
        for cid, cls, params in _REGISTRY
    ]

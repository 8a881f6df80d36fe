"""
Procedure table

Maps method names to host callables. The table is filled before dispatching
starts and frozen by the Dispatcher that owns it.
"""

import inspect
import logging
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from seamrpc.protocol.errors import InvalidParamsFault
from seamrpc.protocol.messages import Params

logger = logging.getLogger(__name__)


class ProcedureTable(Mapping[str, Callable]):
    """Read-only (once frozen) mapping of method name to callable"""

    def __init__(self, procedures: Optional[Mapping[str, Callable]] = None):
        self._procedures: Dict[str, Callable] = {}
        self._frozen = False
        for name, procedure in (procedures or {}).items():
            self.register(name, procedure)

    def __getitem__(self, name: str) -> Callable:
        return self._procedures[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._procedures)

    def __len__(self) -> int:
        return len(self._procedures)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, name: str, procedure: Callable) -> Callable:
        """Register a procedure under name

        Raises:
            RuntimeError: The table is already in use by a dispatcher
            ValueError: Empty name
            TypeError: procedure is not callable
        """
        if self._frozen:
            raise RuntimeError("Procedure table is frozen; register procedures before dispatching")
        if not isinstance(name, str) or not name:
            raise ValueError("Procedure name must be a non-empty string")
        if not callable(procedure):
            raise TypeError(f'Given value for "{name}" is no valid callable')
        self._procedures[name] = procedure
        logger.debug(f"Registered RPC method: {name}")
        return procedure

    def procedure(self, name: str = None):
        """Decorator form of register(); defaults to the function name"""
        def decorator(func: Callable) -> Callable:
            return self.register(name or func.__name__, func)
        return decorator

    def freeze(self) -> "ProcedureTable":
        self._frozen = True
        return self

    def resolve(self, name: str) -> Optional[Callable]:
        """Look up a procedure, None when not registered"""
        return self._procedures.get(name)


def invoke(procedure: Callable, params: Params) -> Any:
    """Call procedure with positional (list) or keyword (dict) params

    Raises:
        InvalidParamsFault: params do not fit the procedure signature
    """
    args = params if isinstance(params, list) else []
    kwargs = params if isinstance(params, dict) else {}

    try:
        signature = inspect.signature(procedure)
    except (TypeError, ValueError):
        # builtins without introspectable signatures
        signature = None

    if signature is not None:
        try:
            signature.bind(*args, **kwargs)
        except TypeError as e:
            raise InvalidParamsFault(str(e)) from e

    return procedure(*args, **kwargs)

"""
JSON-RPC Server Module

- procedures: ProcedureTable of host callables
- dispatcher: Dispatcher turning request bytes into response bytes
"""

from .procedures import ProcedureTable
from .dispatcher import Dispatcher

__all__ = ["ProcedureTable", "Dispatcher"]

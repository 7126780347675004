"""Response assembly - helper bundles, trigger table and the assembler."""

from .models import AssembledResponse, HelperBundle, HelperFile
from .helpers import SPINNER
from .triggers import Trigger, TriggerRegistry, default_registry
from .assembler import ResponseAssembler

__all__ = [
    "AssembledResponse",
    "HelperBundle",
    "HelperFile",
    "SPINNER",
    "Trigger",
    "TriggerRegistry",
    "default_registry",
    "ResponseAssembler",
]

from .envelope import ResponseEnvelope
from .invocation_event import InvocationEvent

__all__ = ["InvocationEvent", "ResponseEnvelope"]

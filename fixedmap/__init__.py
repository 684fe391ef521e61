"""An immutable lookup map whose keys are checked for uniqueness when it is built, with a small demo command."""

__version__ = "0.1.0"
__all__ = ["lookup", "demo"]
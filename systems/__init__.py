from systems.action import ResolvableAction, resolve

__all__ = [
    "ResolvableAction",
    "resolve",
]

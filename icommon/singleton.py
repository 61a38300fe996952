"""A base class allowing at most one live instance per subclass."""

from __future__ import annotations

from icommon.errors import check

_instances: dict[type, Singleton] = {}


class Singleton:
    """Subclasses may have one instance at a time, reachable from the class."""

    def __init__(self) -> None:
        cls = type(self)
        check(cls not in _instances, f"{cls.__name__}: singleton already exists")
        _instances[cls] = self

    @classmethod
    def get_singleton(cls) -> Singleton:
        """Return the instance; HaltError if there is none."""
        instance = _instances.get(cls)
        check(instance is not None, f"{cls.__name__}: no singleton instance")
        return instance

    @classmethod
    def get_singleton_ptr(cls) -> Singleton | None:
        """Return the instance, or None."""
        return _instances.get(cls)

    def release_singleton(self) -> None:
        """Stop being the class's instance, so another may be made."""
        cls = type(self)
        check(_instances.get(cls) is self, f"{cls.__name__}: not the registered singleton")
        del _instances[cls]
import pytest

from icommon.errors import HaltError
from icommon.singleton import Singleton


class _Manager(Singleton):
    pass


class _Registry(Singleton):
    pass


def test_instance_is_reachable_from_class():
    manager = _Manager()
    try:
        assert _Manager.get_singleton() is manager
        assert _Manager.get_singleton_ptr() is manager
        assert Singleton.get_singleton_ptr() is None
    finally:
        Singleton.release_singleton(manager)


def test_second_instance_halts():
    manager = _Manager()
    try:
        with pytest.raises(HaltError):
            _Manager()
        assert _Manager.get_singleton() is manager
    finally:
        Singleton.release_singleton(manager)


def test_released_singleton_is_gone():
    registry = _Registry()
    assert _Registry.get_singleton() is registry
    Singleton.release_singleton(registry)
    assert _Registry.get_singleton_ptr() is None
    with pytest.raises(HaltError):
        _Registry.get_singleton()
    replacement = _Registry()
    try:
        assert _Registry.get_singleton_ptr() is replacement
    finally:
        Singleton.release_singleton(replacement)


def test_new_instance_after_release():
    first = _Registry()
    Singleton.release_singleton(first)
    second = _Registry()
    try:
        assert _Registry.get_singleton() is second
        assert _Registry.get_singleton() is not first
    finally:
        Singleton.release_singleton(second)


def test_classes_are_independent():
    manager = _Manager()
    try:
        assert _Registry.get_singleton_ptr() is None
        registry = _Registry()
        assert _Registry.get_singleton() is registry
        assert _Manager.get_singleton() is manager
        Singleton.release_singleton(registry)
        assert _Manager.get_singleton() is manager
    finally:
        Singleton.release_singleton(manager)


def test_double_release_halts():
    manager = _Manager()
    Singleton.release_singleton(manager)
    with pytest.raises(HaltError):
        Singleton.release_singleton(manager)
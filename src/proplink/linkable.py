import logging
from dataclasses import is_dataclass
from functools import cache
from types import MappingProxyType

from .exc import InvalidOperation
from .fields import LinkedField

logger = logging.getLogger(__name__)

_LINKS = "__proplink_links__"
_OWNER = "__proplink_owner__"


def _instance_dict(obj):
    return object.__getattribute__(obj, "__dict__")


def _links_of(obj):
    return _instance_dict(obj).get(_LINKS) or {}


class Linkable:
    """Mixin for objects whose attributes may be forwarded to another object.

    Instances are not created directly: ``make_linkable`` swaps the class of an
    existing object for ``Linked[Cls]``, which puts this mixin in front of the
    original class. Linked attributes live in the instance's link table and take
    precedence over anything else, including properties defined on ``Cls``.
    """

    def __getattribute__(self, attr):
        if (link := _links_of(self).get(attr)) is not None:
            return link.get()
        return super().__getattribute__(attr)

    def __getattr__(self, attr):
        if (link := _links_of(self).get(attr)) is not None:
            # A linked field with no value fails like its store does
            return link.get()
        if (fallback := getattr(super(), "__getattr__", None)) is not None:
            try:
                return fallback(attr)
            except AttributeError:
                pass
        owner = _instance_dict(self).get(_OWNER)
        if owner is not None and not attr.startswith("__"):
            return owner.lookup(attr)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{attr}'")

    def __setattr__(self, attr, value):
        if (link := _links_of(self).get(attr)) is not None:
            link.set(value)
        else:
            super().__setattr__(attr, value)

    def __delattr__(self, attr):
        if attr in _links_of(self):
            raise InvalidOperation(f"Cannot delete linked field '{attr}'", obj=self, field=attr)
        super().__delattr__(attr)

    def __copy__(self):
        cls = type(self)
        new = cls.__new__(cls)
        d = dict(_instance_dict(self))
        if _LINKS in d:
            d[_LINKS] = dict(d[_LINKS])
        _instance_dict(new).update(d)
        return new


@cache
def linkable_class(cls):
    return type(
        f"Linked[{cls.__qualname__}]",
        (Linkable, cls),
        {"__module__": cls.__module__},
    )


def make_linkable(obj):
    if isinstance(obj, Linkable):
        return obj
    cls = type(obj)
    if is_dataclass(cls) and cls.__dataclass_params__.frozen:
        raise InvalidOperation(f"Cannot link fields of frozen instance of {cls.__qualname__}")
    try:
        _instance_dict(obj)
        obj.__class__ = linkable_class(cls)
    except (AttributeError, TypeError) as exc:
        raise InvalidOperation(
            f"Cannot install field accessors on {cls.__qualname__} objects: {exc}", obj=obj
        ) from exc
    return obj


def install_link(obj, name, field: LinkedField):
    make_linkable(obj)
    d = _instance_dict(obj)
    d.pop(name, None)
    d.setdefault(_LINKS, {})[name] = field
    logger.debug("Linked %s.%s -> %r", type(obj).__qualname__, name, field)


def attach_owner(obj, owner):
    make_linkable(obj)
    _instance_dict(obj)[_OWNER] = owner


def owner_of(obj):
    try:
        return _instance_dict(obj).get(_OWNER)
    except AttributeError:
        return None


def links(obj):
    try:
        return MappingProxyType(dict(_links_of(obj)))
    except AttributeError:
        return MappingProxyType({})

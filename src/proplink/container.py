import logging

from .exc import ConstructionFailure, InvalidOperation, KeyNotFound
from .fields import Seed
from .linkable import Linkable, attach_owner, make_linkable, owner_of
from .redirect import aslist, redirect

logger = logging.getLogger(__name__)


class Container:
    """Hold member objects that share some of their fields through the container.

    Every member is created with the container as its owner: any attribute the
    member cannot resolve by itself is looked up on the container. Some member
    fields can also be linked, in which case reading or writing them on the
    member reads or writes the container's field of the same name. If several
    members link the same field, they all share one value.
    """

    # Seed policy for link_props_of and contain_class when none is given
    seed_policy = Seed.MISSING

    def __init__(self, fields=None, /, **more):
        self.set_fields(fields, **more)

    def set_fields(self, fields=None, /, **more):
        for k, v in {**(fields or {}), **more}.items():
            setattr(self, k, v)

    def lookup(self, name):
        return getattr(self, name)

    def _member(self, key):
        member = vars(self).get(key)
        if isinstance(member, Linkable) and owner_of(member) is self:
            return member
        return None

    def __getitem__(self, key):
        if (member := self._member(key)) is None:
            raise KeyNotFound(key)
        return member

    def __contains__(self, key):
        return self._member(key) is not None

    def contain_class(
        self,
        key,
        class_factory,
        params=None,
        link_props=None,
        link_props_override=False,
        *,
        args=(),
        seed=None,
    ):
        if not isinstance(class_factory, type):
            raise InvalidOperation(f"Cannot contain {class_factory!r}: it is not a class")

        kwargs = params or {}
        try:
            if class_factory.__new__ is object.__new__:
                obj = object.__new__(class_factory)
            else:
                obj = class_factory.__new__(class_factory, *args, **kwargs)
        except Exception as exc:
            raise ConstructionFailure(exc=exc, factory=class_factory) from exc

        # The owner must be attached before __init__ so that the constructor
        # already sees the container's fields
        make_linkable(obj)
        attach_owner(obj, self)
        if isinstance(obj, class_factory):
            try:
                obj.__init__(*args, **kwargs)
            except Exception as exc:
                raise ConstructionFailure(exc=exc, factory=class_factory) from exc

        setattr(self, key, obj)
        logger.debug("Contained %s under '%s'", class_factory.__qualname__, key)

        if link_props:
            self.link_props_of([key], link_props, link_props_override, seed=seed)

    def link_props_of(self, keys, props, props_override=False, *, seed=None):
        seed = self.seed_policy if seed is None else seed
        for key in aslist(keys):
            redirect(
                self,
                self[key],
                aslist(props),
                copy=True,
                force_override=props_override,
                seed=seed,
            )

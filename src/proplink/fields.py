from enum import Enum

from ovld import ovld
from ovld.medley import ABSENT

#############
# Constants #
#############


class Seed(Enum):
    """Decides whether a link seeds the target with the source's value.

    * ``MISSING``: seed when the target has no value at all.
    * ``FALSY``: seed when the target's value is missing or falsy. A shared value
      of ``0`` or ``""`` is then indistinguishable from no value.
    """

    MISSING = "missing"
    FALSY = "falsy"


################
# Field access #
################


@ovld
def getfield(obj: dict, name):
    return obj.get(name, ABSENT)


@ovld
def getfield(obj: object, name):
    return getattr(obj, name, ABSENT)


@ovld
def setfield(obj: dict, name, value):
    obj[name] = value


@ovld
def setfield(obj: object, name, value):
    setattr(obj, name, value)


def should_seed(current, *, override=False, seed=Seed.MISSING):
    if override:
        return True
    elif seed is Seed.FALSY:
        return current is ABSENT or not current
    else:
        return current is ABSENT


###############
# LinkedField #
###############


class LinkedField:
    __slots__ = ("store", "name")

    def __init__(self, store, name):
        self.store = store
        self.name = name

    def get(self):
        value = getfield(self.store, self.name)
        if value is ABSENT:
            raise AttributeError(
                f"Linked field '{self.name}' has no value in {type(self.store).__name__} store"
            )
        return value

    def set(self, value):
        setfield(self.store, self.name, value)

    def __repr__(self):
        return f"LinkedField({type(self.store).__name__}@{id(self.store):#x}, {self.name!r})"

import logging

from ovld import ovld

from .fields import ABSENT, LinkedField, Seed, getfield, setfield, should_seed
from .linkable import install_link

logger = logging.getLogger(__name__)


@ovld
def aslist(xs: list | tuple):
    return list(xs)


@ovld
def aslist(x: object):
    return [x]


def redirect_field(target, source, prop, copy=True, force_override=False, seed=Seed.MISSING):
    if copy:
        current = getfield(target, prop)
        if should_seed(current, override=force_override, seed=seed):
            value = getfield(source, prop)
            if value is not ABSENT:
                logger.debug("Seeding %r on %s with %r", prop, type(target).__qualname__, value)
                setfield(target, prop, value)
    install_link(source, prop, LinkedField(target, prop))


def redirect(target, sources, properties, copy=True, force_override=False, *, seed=Seed.MISSING):
    """Redirect reads and writes of the given properties of sources to target.

    Arguments:
        target: The object that holds the shared values. May be a dict.
        sources: An object or a list of objects whose properties are redirected.
        properties: A property name or a list of property names.
        copy: Whether to seed target with the value of each source before linking.
        force_override: Seed even if target already has a value.
        seed: The policy that decides whether target "already has a value".
    """
    for source in aslist(sources):
        for prop in aslist(properties):
            redirect_field(target, source, prop, copy, force_override, seed)

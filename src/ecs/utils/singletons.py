from typing import Type, TypeVar

from esper import World

T = TypeVar("T")


def get_singleton(world: World, component_type: Type[T]) -> T:
    """Return the shared instance of ``component_type``; raises RuntimeError if missing."""
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} definitions not found")

"""Controller discovery: collect API routers from modules."""

import importlib
import pkgutil
from collections.abc import Iterable, Sequence
from types import ModuleType

import structlog
from fastapi import APIRouter

logger = structlog.get_logger()

ModuleRef = ModuleType | str


def _import(module: ModuleRef) -> ModuleType:
    if isinstance(module, str):
        return importlib.import_module(module)
    return module


def _routers_in(module: ModuleType) -> list[APIRouter]:
    return [value for value in vars(module).values() if isinstance(value, APIRouter)]


def get_controller_routers(module: ModuleRef) -> list[APIRouter]:
    """Return the routers defined at module level, in definition order.

    Packages are walked recursively; submodules are imported as needed.
    A router reachable under several names is returned once.
    """
    root = _import(module)
    modules = [root]
    if hasattr(root, "__path__"):
        modules.extend(
            importlib.import_module(info.name)
            for info in pkgutil.walk_packages(root.__path__, prefix=f"{root.__name__}.")
        )

    routers: list[APIRouter] = []
    seen: set[int] = set()
    for mod in modules:
        for router in _routers_in(mod):
            if id(router) not in seen:
                seen.add(id(router))
                routers.append(router)

    logger.debug(
        "Discovered controllers",
        module=root.__name__,
        modules_scanned=len(modules),
        controllers=len(routers),
    )
    return routers


def resolve_controllers(
    controllers: Iterable[APIRouter] | None = None,
    *,
    module: ModuleRef | None = None,
    modules: Sequence[ModuleRef] | None = None,
) -> list[APIRouter] | None:
    """Normalize the supported controller inputs into one ordered list.

    ``module`` is shorthand for ``modules=[module]``; ``modules`` are
    scanned in order and their routers flattened. Returns ``None`` when no
    controllers were supplied at all, which UI registrations treat as an
    externally hosted document.
    """
    supplied = sum(arg is not None for arg in (controllers, module, modules))
    if supplied > 1:
        raise TypeError("Pass only one of controllers, module or modules")

    if module is not None:
        modules = [module]
    if modules is not None:
        controllers = [
            router for mod in modules for router in get_controller_routers(mod)
        ]
    if controllers is None:
        return None
    return list(controllers)

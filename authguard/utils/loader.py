import importlib
import logging

from authguard import registry
from authguard.settings import settings

logger = logging.getLogger("authguard.loader")


def import_from_path(path: str):
    """
    Import and return the attribute named by a dotted path.
    Example: "authguard.stores.memory.InMemoryUserStore"
    """
    try:
        module_path, attr_name = path.rsplit(".", 1)
        module = importlib.import_module(module_path)
        return getattr(module, attr_name)
    except (ImportError, AttributeError, ValueError) as e:
        raise RuntimeError(
            f"Cannot import '{path}': {e}. "
            f"Expected a dotted path in the form 'module.path.Name'."
        )


def load_component(path: str):
    """Import the object at `path`, instantiating it when it is a class."""
    component = import_from_path(path)
    if isinstance(component, type):
        return component()
    return component


def configure_from_settings() -> list[str]:
    """
    Register every collaborator named in settings.
    Returns the names of the settings that were left unset.
    """
    missing = []
    wiring = (
        ("AUTH_TOKEN_VERIFIER", registry.register_token_verifier),
        ("AUTH_USER_STORE", registry.register_user_store),
        ("AUTH_SESSION_BACKEND", registry.register_session_backend),
    )
    for name, register in wiring:
        path = getattr(settings, name)
        if not path:
            missing.append(name)
            continue
        register(load_component(path))
        logger.info("Registered %s from %s", name, path)
    return missing

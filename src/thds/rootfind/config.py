"""Registered, type-safe configuration items.

Every item has a fully-qualified name, and a value that comes from (highest precedence first):

- a thread-local override via `set_local`,
- a global value via `set_global` or `set_global_defaults`,
- an environment variable present when the item is registered,
- the default given at registration.

Usage:

from thds.rootfind import config

MARKER = config.item("thds.rootfind.marker", "Cargo.lock")

with MARKER.set_local("pyproject.toml"):
    assert MARKER() == "pyproject.toml"

Environment variables may use the item name directly, or with dots and dashes
replaced by underscores, optionally upper-cased:

export THDS_ROOTFIND_MARKER=pyproject.toml
"""
import importlib
import typing as ty
from os import getenv

from .stack_context import StackContext

_NOT_CONFIGURED = object()


class UnconfiguredError(ValueError):
    pass


class ConfigNameCollisionError(KeyError):
    pass


def _sanitize_env(env_var_name: str) -> str:
    return env_var_name.replace("-", "_").replace(".", "_")


def _getenv(env_var_name: str) -> ty.Optional[str]:
    return (
        getenv(env_var_name)
        or getenv(_sanitize_env(env_var_name))
        or getenv(_sanitize_env(env_var_name).upper())
    )


T = ty.TypeVar("T")


class ConfigItem(ty.Generic[T]):
    """Should only ever be constructed at a module level."""

    def __init__(
        self,
        name: str,
        default: T = ty.cast(T, _NOT_CONFIGURED),
        *,
        parse: ty.Callable[[ty.Any], T] = lambda x: x,
        allow_env_var: bool = True,
    ):
        if name in _REGISTRY:
            raise ConfigNameCollisionError(f"Config item {name} has already been registered!")
        _REGISTRY[name] = self
        self.name = name
        self.parse = parse
        env_value = _getenv(name) if allow_env_var else None
        if env_value:
            # only read at registration; use set_global after startup.
            self.global_value = parse(env_value)
        else:
            self.global_value = default
        self._stack_context: StackContext[T] = StackContext(
            "config " + name, ty.cast(T, _NOT_CONFIGURED)
        )

    def set_global(self, value: T):
        """Global to the current process."""
        self.global_value = self.parse(value)

    def set_local(self, value: T) -> ty.ContextManager[T]:
        """Local to the current thread, for the duration of the `with` block."""
        return self._stack_context.set(self.parse(value))

    def __call__(self) -> T:
        local = self._stack_context()
        if local is not _NOT_CONFIGURED:
            return local
        if self.global_value is _NOT_CONFIGURED:
            raise UnconfiguredError(f"Config item '{self.name}' has not been configured!")
        return self.global_value


def item(
    name: str,
    default: T = ty.cast(T, _NOT_CONFIGURED),
    *,
    parse: ty.Callable[[ty.Any], T] = lambda x: x,
    allow_env_var: bool = True,
) -> ConfigItem[T]:
    return ConfigItem(name, default, parse=parse, allow_env_var=allow_env_var)


_REGISTRY: ty.Dict[str, ConfigItem] = dict()


def config_by_name(name: str) -> ConfigItem:
    """Prefer accessing the ConfigItem object directly."""
    return _REGISTRY[name]


def set_global_defaults(config: ty.Dict[str, ty.Any]):
    """Set many items at once, e.g. from a parsed TOML or JSON file.

    Nested dictionaries are flattened into dotted names.
    """
    for name, value in config.items():
        if isinstance(value, dict):
            set_global_defaults({f"{name}.{key}": val for key, val in value.items()})
            continue
        maybe_module_name = ".".join(name.split(".")[:-1])
        if name not in _REGISTRY and maybe_module_name:
            # the item may live in a module nobody has imported yet.
            try:
                importlib.import_module(maybe_module_name)
            except ModuleNotFoundError:
                pass
        try:
            _REGISTRY[name].set_global(value)
        except KeyError as kerr:
            raise KeyError(
                f"Config item {name} is not registered"
                f" and no module with the name {maybe_module_name} was importable."
                " Please double-check your configuration."
            ) from kerr


def show_all_config() -> ty.Dict[str, ty.Any]:
    """Every configured item by name. Items with no value yet are left out."""
    shown = dict()
    for name, config_item in _REGISTRY.items():
        try:
            shown[name] = config_item()
        except UnconfiguredError:
            continue
    return shown

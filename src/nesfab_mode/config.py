"""ContextVar-based indentation configuration for nesfab-mode.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A host sets the config once (for example from its tab-width setting) and
every indent computation in that context reads it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from nesfab_mode.config import IndentConfig, indent_config_context

    with indent_config_context(IndentConfig(indent_width=2)):
        column = Indenter().column_for(lines, 3)

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from nesfab_mode.errors import ConfigError
from nesfab_mode.keywords import BLOCK_OPENERS, CONTINUATION_PEERS


@dataclass(frozen=True, slots=True)
class Continuation:
    """How a continuation keyword (``else``, ``case``...) finds its peer.

    Attributes:
        peers: Leading tokens of opener lines the continuation aligns with
        stops: Leading tokens of opener lines that end the peer search
        terminal: Peer tokens that close their chain (a plain ``else``) unless
            another peer follows on the same line (``else if``)

    """

    peers: frozenset[str]
    stops: frozenset[str] = frozenset()
    terminal: frozenset[str] = frozenset()


def _default_continuations() -> dict[str, Continuation]:
    return {
        keyword: Continuation(peers=peers, stops=stops, terminal=terminal)
        for keyword, (peers, stops, terminal) in CONTINUATION_PEERS.items()
    }


@dataclass(frozen=True, slots=True)
class IndentConfig:
    """Immutable indentation configuration.

    Attributes:
        indent_width: Columns added per nesting level
        tab_width: Column stop distance used when measuring tabs
        use_tabs: Emit tabs (then spaces) when rewriting leading whitespace
        block_openers: Leading tokens that open an indented block
        continuations: Continuation keyword rules; empty disables peer alignment

    """

    indent_width: int = 4
    tab_width: int = 8
    use_tabs: bool = False
    block_openers: frozenset[str] = BLOCK_OPENERS
    continuations: Mapping[str, Continuation] = field(default_factory=_default_continuations)

    def __post_init__(self) -> None:
        if not isinstance(self.indent_width, int) or self.indent_width < 1:
            raise ConfigError("indent_width", f"must be a positive integer, got {self.indent_width!r}")
        if not isinstance(self.tab_width, int) or self.tab_width < 1:
            raise ConfigError("tab_width", f"must be a positive integer, got {self.tab_width!r}")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> IndentConfig:
        """Create IndentConfig from dictionary.

        Useful for host integration where settings come from an editor's
        own configuration. Unknown keys are silently ignored; sequences of
        openers are turned into frozensets and continuation rules may be
        given as ``{"else": {"peers": [...], "stops": [...], "terminal": [...]}}``.

        Args:
            config_dict: Dictionary with config values. Keys should match
                IndentConfig attribute names.

        Returns:
            New IndentConfig instance with values from dict.

        Example:
            >>> config = IndentConfig.from_dict({
            ...     "indent_width": 2,
            ...     "block_openers": ["fn", "if"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.indent_width
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        if "block_openers" in filtered:
            filtered["block_openers"] = _as_frozenset(filtered["block_openers"])
        if "continuations" in filtered:
            filtered["continuations"] = {
                keyword: _as_continuation(keyword, rule)
                for keyword, rule in filtered["continuations"].items()
            }
        return cls(**filtered)


def _as_frozenset(values: Iterable[str] | str) -> frozenset[str]:
    if isinstance(values, str):
        return frozenset(values.split())
    return frozenset(values)


def _as_continuation(keyword: str, rule: Any) -> Continuation:
    if isinstance(rule, Continuation):
        return rule
    if isinstance(rule, Mapping):
        return Continuation(
            peers=_as_frozenset(rule.get("peers", ())),
            stops=_as_frozenset(rule.get("stops", ())),
            terminal=_as_frozenset(rule.get("terminal", ())),
        )
    raise ConfigError("continuations", f"rule for {keyword!r} must be a mapping, got {rule!r}")


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: IndentConfig = IndentConfig()

# Thread-local configuration via ContextVar
_indent_config: ContextVar[IndentConfig] = ContextVar(
    "indent_config",
    default=_DEFAULT_CONFIG,
)


def get_indent_config() -> IndentConfig:
    """Get current indentation configuration (thread-local)."""
    return _indent_config.get()


def set_indent_config(config: IndentConfig) -> None:
    """Set indentation configuration for current context.

    Args:
        config: IndentConfig instance to use for this context.

    """
    _indent_config.set(config)


def reset_indent_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _indent_config.set(_DEFAULT_CONFIG)


@contextmanager
def indent_config_context(config: IndentConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with indent_config_context(IndentConfig(indent_width=2)):
        ...     get_indent_config().indent_width
        2

    """
    previous = _indent_config.get()
    _indent_config.set(config)
    try:
        yield
    finally:
        _indent_config.set(previous)


__all__ = [
    "Continuation",
    "IndentConfig",
    "get_indent_config",
    "set_indent_config",
    "reset_indent_config",
    "indent_config_context",
]

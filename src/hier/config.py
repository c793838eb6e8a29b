"""Engine configuration.

EngineConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from hier.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Engine configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = EngineConfig(root_name="app", lifecycle_logging=False)
    """

    # Tree
    root_name: str = "root"  # Shown as the outermost name by Engine.show()

    # Logging: DEBUG records on the "hier.tree" logger for mount/render/teardown
    lifecycle_logging: bool = True

    def __post_init__(self) -> None:
        name = self.root_name
        if not isinstance(name, str) or not name:
            msg = f"root_name must be a non-empty string, got {name!r}"
            raise ConfigurationError(msg)
        if "/" in name or any(ch.isspace() for ch in name):
            msg = f"root_name must not contain '/' or whitespace, got {name!r}"
            raise ConfigurationError(msg)

"""Action registry - maps flag tokens to initialization actions.

The registry is data, not control flow: every action drako knows about is an
:class:`~drako.models.ActionSpec` in :data:`DEFAULT_ACTIONS`, and lookups go
through a token -> spec dict built once at import time.
"""

import logging
from collections.abc import Iterable, Iterator

from .models import ActionSpec, FileWrite, ShellCommand
from .templates import DOCKERFILE_TEMPLATE, LICENSE_TEMPLATE, README_TEMPLATE

logger = logging.getLogger(__name__)


DEFAULT_ACTIONS: tuple[ActionSpec, ...] = (
    ActionSpec(
        name="git",
        triggers={"--git", "-g"},
        effect=ShellCommand(template="git init"),
        description="Initialize a Git repository.",
    ),
    ActionSpec(
        name="readme",
        triggers={"--readme", "-r"},
        effect=FileWrite(filename="README.md", template=README_TEMPLATE),
        description="Generate a template README.md file.",
    ),
    ActionSpec(
        name="license",
        triggers={"--license", "-l", "--mit"},
        effect=FileWrite(filename="LICENSE", template=LICENSE_TEMPLATE),
        description="Generate a template MIT License file.",
    ),
    ActionSpec(
        name="docker",
        triggers={"--docker", "-do"},
        effect=FileWrite(filename="Dockerfile", template=DOCKERFILE_TEMPLATE),
        description="Generate a template Dockerfile.",
    ),
    ActionSpec(
        name="go",
        triggers={"--go", "-go"},
        effect=ShellCommand(template="go mod init {name}"),
        description="Initialize a Go module named after the directory.",
    ),
    ActionSpec(
        name="cargo",
        triggers={"--cargo", "-c"},
        effect=ShellCommand(template="cargo init"),
        description="Initialize a Rust Cargo project.",
    ),
    ActionSpec(
        name="npm",
        triggers={"--npm", "-n"},
        effect=ShellCommand(template="npm init -y"),
        description="Initialize an npm project (package.json).",
    ),
    ActionSpec(
        name="bun",
        triggers={"--bun", "-b"},
        effect=ShellCommand(template="bun init"),
        description="Initialize a Bun project.",
    ),
    ActionSpec(
        name="yarn",
        triggers={"--yarn", "-y"},
        effect=ShellCommand(template="yarn init -y"),
        description="Initialize a Yarn project.",
    ),
    ActionSpec(
        name="pnpm",
        triggers={"--pnpm", "-p"},
        effect=ShellCommand(template="pnpm init"),
        description="Initialize a pnpm project.",
    ),
    ActionSpec(
        name="deno",
        triggers={"--deno", "-d"},
        effect=ShellCommand(template="deno init"),
        description="Initialize a Deno project (deno.json).",
    ),
)


class ActionRegistry:
    """Read-only lookup from trigger token to :class:`ActionSpec`.

    Iteration yields specs in registration order, which is also the order
    the help screen lists them in.

    Args:
        actions: Action specs to register

    Raises:
        ValueError: If two specs share a trigger token
    """

    def __init__(self, actions: Iterable[ActionSpec]):
        self._actions: list[ActionSpec] = []
        self._by_trigger: dict[str, ActionSpec] = {}
        for spec in actions:
            for token in spec.triggers:
                existing = self._by_trigger.get(token)
                if existing is not None:
                    raise ValueError(
                        f"Trigger {token!r} is registered for both "
                        f"{existing.name!r} and {spec.name!r}"
                    )
                self._by_trigger[token] = spec
            self._actions.append(spec)
        logger.debug(
            f"ActionRegistry initialized: {len(self._actions)} actions, "
            f"{len(self._by_trigger)} triggers"
        )

    def resolve(self, token: str) -> ActionSpec | None:
        """Return the action ``token`` triggers, or None if it is unknown."""
        return self._by_trigger.get(token)

    def get(self, name: str) -> ActionSpec | None:
        """Return the action registered under ``name``."""
        for spec in self._actions:
            if spec.name == name:
                return spec
        return None

    @property
    def triggers(self) -> frozenset[str]:
        return frozenset(self._by_trigger)

    def __contains__(self, token: object) -> bool:
        return token in self._by_trigger

    def __iter__(self) -> Iterator[ActionSpec]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)


DEFAULT_REGISTRY = ActionRegistry(DEFAULT_ACTIONS)


def get_registry() -> ActionRegistry:
    """Return the registry of built-in actions."""
    return DEFAULT_REGISTRY

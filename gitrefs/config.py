"""Runtime configuration for gitrefs.

Settings come from, in increasing precedence: built-in defaults, an optional
YAML file, environment variables, and explicit overrides (CLI flags).

Example config file:

    git: /usr/local/bin/git
    timeout: 30
    stat_width: 99999
    verbose: false
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from gitrefs.domain.diff_stat import DEFAULT_STAT_WIDTH
from gitrefs.infrastructure.git.runner import DEFAULT_TIMEOUT, GitCommandRunner

ENV_GIT_BINARY = "GITREFS_GIT"
ENV_TIMEOUT = "GITREFS_TIMEOUT"
ENV_VERBOSE = "GITREFS_VERBOSE"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GitConfig:
    """Settings shared by every command.

    Attributes:
        git_binary: Program used to run git
        timeout: Default per-command timeout in seconds
        stat_width: --stat-width passed to git diff
        verbose: Echo git commands and failures to stderr
    """

    git_binary: str = "git"
    timeout: float = DEFAULT_TIMEOUT
    stat_width: int = DEFAULT_STAT_WIDTH
    verbose: bool = False

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict | None, source: str = "<dict>") -> GitConfig:
        """Build a config from a mapping such as a parsed YAML document.

        Keys follow the config file format ("git" for the binary). Keys
        left empty (None) keep their defaults.

        Raises:
            ValueError: If a value has the wrong type
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config in {source}: expected a mapping")

        data = {key: value for key, value in data.items() if value is not None}
        config = cls()
        try:
            if "git" in data:
                config = replace(config, git_binary=str(data["git"]))
            if "timeout" in data:
                config = replace(config, timeout=float(data["timeout"]))
            if "stat_width" in data:
                config = replace(config, stat_width=int(data["stat_width"]))
            if "verbose" in data:
                config = replace(config, verbose=_parse_bool(data["verbose"]))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid config in {source}: {e}") from e
        return config

    @classmethod
    def from_file(cls, file_path: Path) -> GitConfig:
        """Load a YAML config file.

        Raises:
            ValueError: If the file is not valid YAML or has bad values
        """
        try:
            data = yaml.safe_load(file_path.read_text())
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {file_path}: {e}") from e
        return cls.from_dict(data, source=str(file_path))

    @classmethod
    def load(
        cls,
        config_file: Path | None = None,
        environ: dict[str, str] | None = None,
        **overrides,
    ) -> GitConfig:
        """Resolve the effective config.

        Args:
            config_file: Optional YAML file
            environ: Environment to read (default: os.environ)
            **overrides: Field values that win over everything else; None
                values are ignored

        Returns:
            The merged GitConfig
        """
        config = cls.from_file(config_file) if config_file else cls()
        config = config.with_environment(os.environ if environ is None else environ)

        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown config fields: {', '.join(sorted(unknown))}")
        return replace(
            config, **{key: value for key, value in overrides.items() if value is not None}
        )

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def with_environment(self, environ) -> GitConfig:
        config = self
        if environ.get(ENV_GIT_BINARY):
            config = replace(config, git_binary=environ[ENV_GIT_BINARY])
        if environ.get(ENV_TIMEOUT):
            try:
                config = replace(config, timeout=float(environ[ENV_TIMEOUT]))
            except ValueError as e:
                raise ValueError(f"Invalid {ENV_TIMEOUT}: {environ[ENV_TIMEOUT]}") from e
        if environ.get(ENV_VERBOSE):
            config = replace(config, verbose=_parse_bool(environ[ENV_VERBOSE]))
        return config

    def create_runner(self) -> GitCommandRunner:
        return GitCommandRunner(
            git_binary=self.git_binary,
            default_timeout=self.timeout,
            verbose=self.verbose,
        )


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES

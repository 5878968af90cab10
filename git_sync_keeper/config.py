"""Configuration handling for git-sync-keeper"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Configuration for git-sync-keeper with validation."""

    # Repository conventions
    remote_name: str = "origin"
    default_branch: str = "master"  # Unborn HEAD whose branch name git does not print

    # Command execution
    command_timeout: Optional[float] = None  # Seconds, None = wait forever
    echo_commands: bool = True  # Echo mutating git commands to the console

    # Commit policy
    fail_if_nothing_to_commit: bool = False

    # Output modes
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_remote_name()
        self._validate_default_branch()
        self._validate_command_timeout()

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def _validate_default_branch(self):
        """Validate default_branch is not empty."""
        if not self.default_branch or not self.default_branch.strip():
            raise ValueError("default_branch cannot be empty")
        self.default_branch = self.default_branch.strip()

    def _validate_command_timeout(self):
        """Validate command_timeout is positive when set."""
        if self.command_timeout is not None and self.command_timeout <= 0:
            raise ValueError(f"command_timeout must be positive, got {self.command_timeout}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "remote_name": self.remote_name,
            "default_branch": self.default_branch,
            "command_timeout": self.command_timeout,
            "echo_commands": self.echo_commands,
            "fail_if_nothing_to_commit": self.fail_if_nothing_to_commit,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key, mirroring dict access."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "remote_name",
            "default_branch",
            "command_timeout",
            "echo_commands",
            "fail_if_nothing_to_commit",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

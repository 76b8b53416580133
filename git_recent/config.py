"""Configuration handling for git-recent"""

from dataclasses import dataclass

from git_recent.constants import DEFAULT_PAGE_SIZE, DEFAULT_TICK_RATE_MS


@dataclass
class Config:
    """Configuration for git-recent with validation."""

    # Repository location
    repo_path: str = "."

    # Interactive loop
    tick_rate_ms: int = DEFAULT_TICK_RATE_MS  # Max wait for input before a redraw
    page_size: int = DEFAULT_PAGE_SIZE

    # Execution modes
    list_only: bool = False  # Print the branch table and exit
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_tick_rate()
        self._validate_page_size()

    def _validate_repo_path(self):
        """Validate repo_path is not empty."""
        if not self.repo_path or not self.repo_path.strip():
            raise ValueError("repo_path cannot be empty")
        self.repo_path = self.repo_path.strip()

    def _validate_tick_rate(self):
        """Validate tick_rate_ms is positive."""
        if self.tick_rate_ms <= 0:
            raise ValueError(f"tick_rate_ms must be positive, got {self.tick_rate_ms}")

    def _validate_page_size(self):
        """Validate page_size is positive."""
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_rate_ms / 1000

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "repo_path": self.repo_path,
            "tick_rate_ms": self.tick_rate_ms,
            "page_size": self.page_size,
            "list_only": self.list_only,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "repo_path",
            "tick_rate_ms",
            "page_size",
            "list_only",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

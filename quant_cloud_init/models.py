"""Data models shared by the pure core and the I/O shell."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .utils import strip_protocol


class RefKind(Enum):
    """Kind of Git ref that triggered the workflow."""
    TAG = "tag"
    PULL_REQUEST = "pull_request"
    BRANCH = "branch"


@dataclass(frozen=True)
class RefDescriptor:
    """A classified Git ref."""
    raw_ref: str
    kind: RefKind
    name: str  # tag name, branch name or "pr-<id>"
    pr_id: Optional[str] = None

    def __post_init__(self):
        # pr_id belongs to pull request refs and only to them
        if (self.kind == RefKind.PULL_REQUEST) != (self.pr_id is not None):
            raise ValueError(f"pr_id must be set exactly for pull request refs, got {self.kind.value} with pr_id={self.pr_id!r}")

    @property
    def is_tag(self) -> bool:
        return self.kind == RefKind.TAG

    @property
    def is_pull_request(self) -> bool:
        return self.kind == RefKind.PULL_REQUEST


@dataclass(frozen=True)
class Overrides:
    """Optional user overrides for the derived names."""
    application_name: Optional[str] = None
    master_branch_name: Optional[str] = None
    environment_name: Optional[str] = None


@dataclass(frozen=True)
class ResolvedTarget:
    """Where the current ref deploys to and how its image is tagged."""
    application_name: str
    environment_name: str
    is_production: bool
    image_suffix: str

    @property
    def image_suffix_clean(self) -> str:
        """Image suffix without its leading separator."""
        return self.image_suffix[1:] if self.image_suffix.startswith("-") else self.image_suffix


@dataclass
class ValidationState:
    """Existence of the application and environment in Quant Cloud."""
    application_exists: bool = False
    environment_exists: bool = False


@dataclass(frozen=True)
class RegistryCredentials:
    """Short-lived Quant Cloud Image Registry credentials."""
    endpoint: str
    username: str
    password: str = field(repr=False)

    @property
    def stripped_endpoint(self) -> str:
        return strip_protocol(self.endpoint)


@dataclass
class InitResult:
    """Everything a run produced that downstream steps may consume."""
    target: ResolvedTarget
    validation: ValidationState
    credentials: Optional[RegistryCredentials] = field(default=None, repr=False)
    logged_in: bool = False

    @property
    def stripped_endpoint(self) -> str:
        return self.credentials.stripped_endpoint if self.credentials else ""

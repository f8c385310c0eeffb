"""Data models and constants for the repository snapshot."""

from dataclasses import dataclass, field

# File selection: extensions worth showing in the viewer, the size ceiling
# (strictly below) and how many files to keep per repository.
MAIN_FILE_EXTENSIONS = frozenset(
    {
        ".js", ".ts", ".tsx", ".jsx", ".py", ".md", ".json", ".yaml",
        ".yml", ".html", ".css", ".java", ".go", ".rs", ".cpp", ".c",
    }
)
MAX_FILE_SIZE = 100_000
MAX_MAIN_FILES = 10

# Politeness delay between repositories, independent of rate limiting
REPO_DELAY_SEC = 0.1


def _count(value) -> int:
    try:
        return max(0, int(value or 0))
    except (TypeError, ValueError):
        return 0


@dataclass
class ApiResponse:
    """Response from the GitHub REST API client. ``body`` is None for 404."""

    status: int
    body: dict | list | None


@dataclass
class RepoSummary:
    """One repository as returned by the /user/repos listing."""

    id: int
    name: str
    full_name: str
    default_branch: str
    url: str
    description: str | None
    language: str | None
    stars: int
    forks: int
    size: int
    created_at: str
    updated_at: str
    topics: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "RepoSummary":
        return cls(
            id=data["id"],
            name=data["name"],
            full_name=data["full_name"],
            default_branch=data.get("default_branch") or "main",
            url=data.get("html_url") or "",
            description=data.get("description"),
            language=data.get("language"),
            stars=_count(data.get("stargazers_count")),
            forks=_count(data.get("forks_count")),
            size=_count(data.get("size")),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            topics=list(data.get("topics") or []),
        )


@dataclass
class TreeEntry:
    path: str
    type: str
    size: int = 0

    @classmethod
    def from_api(cls, data: dict) -> "TreeEntry":
        return cls(path=data["path"], type=data.get("type", ""), size=_count(data.get("size")))


@dataclass
class FileRecord:
    path: str
    size: int
    content: str

    def to_dict(self) -> dict:
        return {"path": self.path, "size": self.size, "content": self.content}


@dataclass
class ReadmeRecord:
    content: str
    encoding: str | None

    def to_dict(self) -> dict:
        return {"content": self.content, "encoding": self.encoding}


@dataclass(frozen=True)
class RepoRecord:
    """A repository summary enriched with readme, languages and main files."""

    summary: RepoSummary
    readme: ReadmeRecord | None = None
    languages: dict[str, int] = field(default_factory=dict)
    main_files: list[FileRecord] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return self.summary.full_name

    def to_dict(self) -> dict:
        """Serialize with the field names and order the viewer reads."""
        s = self.summary
        return {
            "id": s.id,
            "name": s.name,
            "fullName": s.full_name,
            "description": s.description,
            "url": s.url,
            "language": s.language,
            "stars": s.stars,
            "forks": s.forks,
            "updatedAt": s.updated_at,
            "createdAt": s.created_at,
            "size": s.size,
            "defaultBranch": s.default_branch,
            "topics": list(s.topics),
            "readme": self.readme.to_dict() if self.readme else None,
            "languages": dict(self.languages),
            "mainFiles": [f.to_dict() for f in self.main_files],
        }

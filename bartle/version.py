"""Version information for bartle."""

from pydantic import BaseModel, ConfigDict, Field

from . import __version__

# Release tooling rewrites these; local checkouts keep the defaults.
COMMIT = "HEAD"
BUILD_DATE = "unknown"
BUILT_BY = "local"


class VersionInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    version: str
    commit: str = COMMIT
    date: str = BUILD_DATE
    built_by: str = Field(default=BUILT_BY, alias="builtBy")

    def summary(self) -> str:
        return f"bartle {self.version} (commit {self.commit}, built {self.date}, by {self.built_by})"

    def to_json(self, short: bool = False) -> str:
        if short:
            return self.model_dump_json(include={"version"})
        return self.model_dump_json(by_alias=True)


def get_current_version() -> str:
    """Version string with the ``v`` prefix used in release tags."""
    return f"v{__version__}"


def get_version_info() -> VersionInfo:
    return VersionInfo(version=get_current_version())

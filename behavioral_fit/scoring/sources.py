"""Profile sources: how the engine's callers supply profile records."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from behavioral_fit.scoring.models import IdealProfile, MeasuredProfile
from behavioral_fit.scoring.profile import ProfileService

_SUFFIXES = (".yaml", ".yml", ".json")


@runtime_checkable
class ProfileSource(Protocol):
    """Supplier of validated profile records, keyed by owner/role id."""

    def fetch_measured_profile(self, owner_id: str) -> MeasuredProfile | None: ...

    def fetch_ideal_profile(self, role_id: str) -> IdealProfile | None: ...


class InMemoryProfileSource:
    """Profile source backed by plain dictionaries."""

    def __init__(
        self,
        measured: Mapping[str, MeasuredProfile] | None = None,
        ideals: Mapping[str, IdealProfile] | None = None,
    ) -> None:
        self._measured = dict(measured or {})
        self._ideals = dict(ideals or {})

    def fetch_measured_profile(self, owner_id: str) -> MeasuredProfile | None:
        return self._measured.get(owner_id)

    def fetch_ideal_profile(self, role_id: str) -> IdealProfile | None:
        return self._ideals.get(role_id)


class DirectoryProfileSource:
    """Profile source reading YAML/JSON files from a directory tree.

    Layout:
        <root>/profiles/<owner_id>.yaml|yml|json
        <root>/roles/<role_id>.yaml|yml|json
    """

    def __init__(
        self, root: Path | str, profile_service: ProfileService | None = None
    ) -> None:
        self.root = Path(root)
        self.profile_service = profile_service or ProfileService()

    def fetch_measured_profile(self, owner_id: str) -> MeasuredProfile | None:
        path = self._find(self.root / "profiles", owner_id)
        if path is None:
            return None
        return self.profile_service.load_measured_profile(path)

    def fetch_ideal_profile(self, role_id: str) -> IdealProfile | None:
        path = self._find(self.root / "roles", role_id)
        if path is None:
            return None
        return self.profile_service.load_ideal_profile(path)

    def _find(self, directory: Path, record_id: str) -> Path | None:
        # Ids are file stems; reject anything that would escape the directory.
        if not record_id or Path(record_id).name != record_id:
            return None
        for suffix in _SUFFIXES:
            candidate = directory / f"{record_id}{suffix}"
            if candidate.is_file():
                return candidate
        return None

"""Dashboard commands: the operations the login and directory views trigger.

Every command catches the errors of its own operation and returns a Feedback
carrying the message to show, so a failure always leaves the dashboard in a
state where the operator can simply try again.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path

from madaris.config import API_BASE_URL, LOAD_DELAY_SEC, SEARCH_DELAY_SEC
from madaris.directory import DirectoryClient
from madaris.errors import (
    INVALID_CREDENTIALS,
    LOGIN_FAILED,
    LOGIN_OK,
    NO_MATCHES,
    NO_SCHOOLS,
    DashboardError,
)
from madaris.export import write_export
from madaris.schema import School, SearchCriteria
from madaris.search import search
from madaris.session import SessionStore
from madaris.storage import JsonFileStorage

ALL_SCHOOLS_HEADING = "جميع المدارس"
SEARCH_RESULTS_HEADING = "نتائج البحث"


@dataclass
class Feedback:
    ok: bool
    message: str


@dataclass
class Dashboard:
    session_store: SessionStore
    directory: DirectoryClient | None = None
    schools: list[School] = field(default_factory=list)
    results: list[School] = field(default_factory=list)
    criteria: SearchCriteria = field(default_factory=SearchCriteria)
    search_mode: bool = False

    def __post_init__(self) -> None:
        if self.directory is None:
            self.directory = DirectoryClient(
                self.session_store, base_url=self.session_store.base_url
            )

    @property
    def heading(self) -> str:
        return SEARCH_RESULTS_HEADING if self.search_mode else ALL_SCHOOLS_HEADING

    def start(self) -> Feedback:
        if self.session_store.restore_on_start():
            return Feedback(True, self.session_store.identity.name)
        return Feedback(False, "")

    def login(self, username: str, password: str) -> Feedback:
        try:
            ok = self.session_store.login(username, password)
        except Exception as e:
            print(f"WARNING: Login error: {e}")
            return Feedback(False, LOGIN_FAILED)
        return Feedback(True, LOGIN_OK) if ok else Feedback(False, INVALID_CREDENTIALS)

    def logout(self) -> Feedback:
        self.session_store.logout()
        self._discard()
        return Feedback(True, "")

    def load(self) -> Feedback:
        """Fetch the full list; on failure nothing from the attempt is kept."""
        if LOAD_DELAY_SEC:
            time.sleep(LOAD_DELAY_SEC)
        try:
            schools = self.directory.fetch_all()
        except DashboardError as e:
            self._discard()
            return Feedback(False, e.message)

        self.schools = schools
        self.results = list(schools)
        self.criteria = SearchCriteria()
        self.search_mode = False
        if not schools:
            return Feedback(True, NO_SCHOOLS)
        return Feedback(True, f"{len(schools)} مدرسة")

    def search(self, criteria: SearchCriteria) -> Feedback:
        """Filter the loaded list. An empty match is a valid, non-error outcome."""
        try:
            matches = search(self.schools, criteria)
        except DashboardError as e:
            return Feedback(False, e.message)

        if SEARCH_DELAY_SEC:
            time.sleep(SEARCH_DELAY_SEC)
        self.criteria = criteria
        self.search_mode = True
        self.results = matches
        if not matches:
            return Feedback(True, NO_MATCHES)
        return Feedback(True, f"{len(matches)} مدرسة")

    def reset(self) -> Feedback:
        self.criteria = SearchCriteria()
        self.search_mode = False
        self.results = list(self.schools)
        return Feedback(True, "")

    def export(self, directory: str | Path = ".") -> Feedback:
        try:
            path = write_export(self.results, directory)
        except DashboardError as e:
            return Feedback(False, e.message)
        return Feedback(True, str(path))

    def _discard(self) -> None:
        self.schools = []
        self.results = []
        self.criteria = SearchCriteria()
        self.search_mode = False


def summary_line(school: School) -> str:
    """One-line plain-text card for a school."""
    lab = "✓" if school.has_computer_lab else "✗"
    internet = "✓" if school.has_internet else "✗"
    return (
        f"{school.school_name} | {school.city} | {school.contract_manager_name} | "
        f"{school.phone_number} | {school.email} | {school.total_students} طالب | "
        f"معمل {lab} | إنترنت {internet}"
    )


def open_dashboard(
    *,
    storage_path: str | Path | None = None,
    base_url: str = API_BASE_URL,
) -> Dashboard:
    """Build a dashboard over file storage and restore any saved session."""
    store = SessionStore(JsonFileStorage(storage_path), base_url=base_url)
    dashboard = Dashboard(store)
    dashboard.start()
    return dashboard

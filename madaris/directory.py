"""School directory client: fetch every school and normalize the raw entries."""

import time

import requests

from madaris.config import API_BASE_URL, SCHOOLS_PATH
from madaris.errors import LoadError, UnauthenticatedError
from madaris.schema import DocumentRef, School
from madaris.utils import document_url, get, parse_bool, to_count, to_text

# Keys the API has used for the school collection, in lookup order
COLLECTION_KEYS = ("schools", "results", "data")


def normalize_school(raw: dict) -> School:
    """Map one raw API entry to the canonical School record."""
    return School(
        id=to_text(raw.get("_id") or raw.get("id")),
        school_name=to_text(raw.get("schoolName")),
        city=to_text(raw.get("city")),
        contract_manager_name=to_text(raw.get("contractManagerName")),
        phone_number=to_text(raw.get("phoneNumber")),
        email=to_text(raw.get("email")),
        kindergarten_students=to_count(raw.get("kindergartenStudents")),
        primary_1to4_students=to_count(raw.get("primary1to4Students")),
        primary_5to6_students=to_count(raw.get("primary5to6Students")),
        intermediate_1to2_students=to_count(raw.get("intermediate1to2Students")),
        intermediate_3_students=to_count(raw.get("intermediate3Students")),
        secondary_students=to_count(raw.get("secondaryStudents")),
        has_computer_lab=parse_bool(raw.get("hasComputerLab")),
        has_internet=parse_bool(raw.get("hasInternet")),
        commercial_registration=DocumentRef(document_url(raw.get("commercialRegistration"))),
        contract_manager_id=DocumentRef(document_url(raw.get("contractManagerId"))),
        created_at=to_text(raw.get("createdAt")),
        updated_at=to_text(raw.get("updatedAt")),
    )


def extract_collection(data) -> list | None:
    """Find the list of raw school entries in a response body."""
    if not isinstance(data, dict):
        return None
    for key in COLLECTION_KEYS:
        value = data.get(key)
        if isinstance(value, list):
            return value
        if isinstance(value, dict) and isinstance(value.get("schools"), list):
            return value["schools"]
    return None


class DirectoryClient:
    def __init__(self, session_store, *, base_url: str = API_BASE_URL) -> None:
        self.session_store = session_store
        self.base_url = base_url.rstrip("/")

    def fetch_all(self) -> list[School]:
        """Fetch and normalize every school record.

        Raises:
            UnauthenticatedError: no session; no request is made.
            LoadError: transport failure, non-2xx status or malformed body.
        """
        credential = self.session_store.credential
        if not credential:
            raise UnauthenticatedError()

        start = time.time()
        try:
            response = get(f"{self.base_url}{SCHOOLS_PATH}", headers={"token": credential})
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise LoadError(str(e)) from e

        entries = extract_collection(data)
        if entries is None:
            raise LoadError("response has no school collection")
        if not all(isinstance(entry, dict) for entry in entries):
            raise LoadError("school collection contains non-object entries")

        schools = [normalize_school(entry) for entry in entries]
        print(f"Loaded {len(schools)} schools ({time.time() - start:.1f}s)")
        return schools

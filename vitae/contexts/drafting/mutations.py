"""
Resume Mutation Engine

ResumeEditor is the only writer of a ResumeData draft. Collection entries are
created through add operations (which assign identity), changed through
identity-keyed partial updates, and deleted through identity-keyed removes.

Unknown identities on update/remove are silent no-ops: identities never leave
the session, so a stale one is not a user-facing failure.
"""

import itertools
from dataclasses import replace
from typing import Any, Dict, List, Optional

from vitae.contexts.drafting.logger import log_entry_added, log_entry_missing
from vitae.contexts.drafting.resume_data_structure import (
    COLLECTION_TYPES,
    ContactInfo,
    ResumeData,
    field_names,
)


class IdentityGenerator:
    """
    Session-scoped identity source.

    Identities come from a monotonic counter, so they are unique for the
    whole session (removed identities are never handed out again) and sort
    in generation order.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return f"{next(self._counter):08d}"


def first_free_identity(data: ResumeData) -> int:
    """Counter value just past the largest numeric identity already in a draft."""
    taken = [
        int(entry.id)
        for collection in COLLECTION_TYPES
        for entry in getattr(data, collection)
        if entry.id.isdigit()
    ]
    return max(taken, default=0) + 1


class ResumeEditor:
    """
    CRUD operations over a ResumeData draft.

    The draft object and its collection lists are mutated in place, so
    readers holding a reference to `editor.data` always see current state.

    Example:
        >>> editor = ResumeEditor()
        >>> exp_id = editor.add_experience(job_title="Analyst", company="Babbage & Co")
        >>> editor.update_experience(exp_id, is_current_job=True)
        >>> editor.remove_experience("does-not-exist")  # no-op
    """

    def __init__(self, data: Optional[ResumeData] = None, identities: Optional[IdentityGenerator] = None):
        self.data = data if data is not None else ResumeData()
        self._identities = identities or IdentityGenerator(first_free_identity(self.data))

    # =========================================================================
    # GENERIC COLLECTION OPERATIONS
    # =========================================================================

    def _collection(self, collection: str) -> List[Any]:
        if collection not in COLLECTION_TYPES:
            raise ValueError(
                f"Unknown collection '{collection}'. Available: {list(COLLECTION_TYPES)}"
            )
        return getattr(self.data, collection)

    @staticmethod
    def _check_fields(cls, values: Dict[str, Any]) -> None:
        allowed = field_names(cls)
        if "id" in values:
            raise ValueError("Entry identity is assigned by the editor and cannot be set")
        unknown = sorted(set(values) - set(allowed))
        if unknown:
            raise ValueError(f"Unknown {cls.__name__} fields: {unknown}")

    def add(self, collection: str, **values) -> str:
        """
        Append a new entry to a collection.

        Field contents are not validated; empty strings are allowed.

        Args:
            collection: Collection name ("experience", "education", ...)
            **values: Entry fields without identity

        Returns:
            The identity assigned to the new entry

        Raises:
            ValueError: If the collection or a field name is unknown
        """
        entries = self._collection(collection)
        cls = COLLECTION_TYPES[collection]
        self._check_fields(cls, values)

        # Build the entry before touching the list so a bad value leaves no trace
        entry = cls(**values, id=self._identities.next_id())
        entries.append(entry)

        log_entry_added(collection, entry.id, len(entries))
        return entry.id

    def update(self, collection: str, entry_id: str, **partial) -> None:
        """
        Shallow-merge `partial` into the entry with identity `entry_id`.

        Identity and position are preserved. No-op when the id is unknown.
        """
        entries = self._collection(collection)
        self._check_fields(COLLECTION_TYPES[collection], partial)

        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                entries[index] = replace(entry, **partial)
                return

        log_entry_missing("update", collection, entry_id)

    def remove(self, collection: str, entry_id: str) -> None:
        """Delete the entry with identity `entry_id`. No-op when the id is unknown."""
        entries = self._collection(collection)

        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                del entries[index]
                return

        log_entry_missing("remove", collection, entry_id)

    def get(self, collection: str, entry_id: str):
        """Return the entry with identity `entry_id`, or None."""
        for entry in self._collection(collection):
            if entry.id == entry_id:
                return entry
        return None

    # =========================================================================
    # SCALAR FIELDS
    # =========================================================================

    def update_contacts(self, **partial) -> None:
        """Merge partial contact fields into the contact block."""
        unknown = sorted(set(partial) - set(field_names(ContactInfo)))
        if unknown:
            raise ValueError(f"Unknown ContactInfo fields: {unknown}")
        self.data.contacts = replace(self.data.contacts, **partial)

    def set_summary(self, summary: str) -> None:
        self.data.summary = summary

    def set_photo(self, photo: Optional[str]) -> None:
        """Store an encoded photo (data URL), or clear it with None."""
        self.data.photo = photo

    # =========================================================================
    # NAMED COLLECTION OPERATIONS
    # =========================================================================

    def add_experience(self, **values) -> str:
        return self.add("experience", **values)

    def update_experience(self, entry_id: str, **partial) -> None:
        self.update("experience", entry_id, **partial)

    def remove_experience(self, entry_id: str) -> None:
        self.remove("experience", entry_id)

    def add_education(self, **values) -> str:
        return self.add("education", **values)

    def update_education(self, entry_id: str, **partial) -> None:
        self.update("education", entry_id, **partial)

    def remove_education(self, entry_id: str) -> None:
        self.remove("education", entry_id)

    def add_certificate(self, **values) -> str:
        return self.add("certificates", **values)

    def update_certificate(self, entry_id: str, **partial) -> None:
        self.update("certificates", entry_id, **partial)

    def remove_certificate(self, entry_id: str) -> None:
        self.remove("certificates", entry_id)

    def add_skill(self, **values) -> str:
        return self.add("skills", **values)

    def update_skill(self, entry_id: str, **partial) -> None:
        self.update("skills", entry_id, **partial)

    def remove_skill(self, entry_id: str) -> None:
        self.remove("skills", entry_id)

    def add_project(self, **values) -> str:
        return self.add("projects", **values)

    def update_project(self, entry_id: str, **partial) -> None:
        self.update("projects", entry_id, **partial)

    def remove_project(self, entry_id: str) -> None:
        self.remove("projects", entry_id)

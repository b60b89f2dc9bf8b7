"""
Form state for the contacts client.

Holds the current list, the search text, the form being filled in and the
contact being edited (if any). The state machine is linear:

    idle --edit--> editing --submit/cancel--> idle
"""

from typing import Any, Callable, Dict, List, Optional

from .api import ContactsClient

FORM_FIELDS = ("firstName", "lastName", "email", "phone", "company", "notes", "avatarUrl")


def empty_form() -> Dict[str, str]:
    return {name: "" for name in FORM_FIELDS}


class ContactsApp:
    def __init__(self, api: ContactsClient):
        self.api = api
        self.contacts: List[Dict[str, Any]] = []
        self.q = ""
        self.editing: Optional[Dict[str, Any]] = None
        self.form: Dict[str, str] = empty_form()

    def load(self) -> List[Dict[str, Any]]:
        self.contacts = self.api.list(self.q)
        return self.contacts

    def search(self, q: str) -> List[Dict[str, Any]]:
        self.q = q
        return self.load()

    def submit(self) -> bool:
        """Create or update from the form. Returns False when required fields are blank."""
        if not (self.form.get("firstName") or "").strip() or not (self.form.get("email") or "").strip():
            return False

        if self.editing:
            self.api.update(self.editing["id"], dict(self.form))
            self.cancel()
        else:
            self.api.create(dict(self.form))
            self.reset()

        self.load()
        return True

    def edit(self, contact: Dict[str, Any]) -> None:
        self.editing = contact
        self.form = {name: contact.get(name) or "" for name in FORM_FIELDS}

    def delete(self, contact_id: str, confirm: Callable[[str], bool]) -> bool:
        if not confirm("Delete contact?"):
            return False
        self.api.remove(contact_id)
        self.load()
        return True

    def cancel(self) -> None:
        self.editing = None
        self.reset()

    def reset(self) -> None:
        self.form = empty_form()

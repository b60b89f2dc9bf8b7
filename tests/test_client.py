import pytest

from client import ContactsApiError, ContactsApp, ContactsClient


@pytest.fixture
def api(client):
    return ContactsClient(http=client)


@pytest.fixture
def ui(api):
    return ContactsApp(api)


def test_api_roundtrip(api):
    created = api.create({"firstName": "Ana", "email": "ana@x.com"})
    assert api.get(created["id"])["firstName"] == "Ana"

    updated = api.update(created["id"], {"company": "Acme"})
    assert updated["company"] == "Acme"

    assert [c["id"] for c in api.list("acme")] == [created["id"]]
    assert api.list("   ") == [updated]

    api.remove(created["id"])
    with pytest.raises(ContactsApiError) as err:
        api.get(created["id"])
    assert err.value.status_code == 404
    assert err.value.detail == "Not found"


def test_api_conflict(api):
    api.create({"firstName": "Ana", "email": "ana@x.com"})
    with pytest.raises(ContactsApiError) as err:
        api.create({"firstName": "Bob", "email": "ana@x.com"})
    assert err.value.status_code == 409


def test_api_health(api):
    assert api.health() is True


def test_submit_creates_and_reloads(ui):
    ui.form.update(firstName="Ana", email="ana@x.com", company="Acme")
    assert ui.submit() is True

    assert len(ui.contacts) == 1
    assert ui.contacts[0]["company"] == "Acme"
    assert ui.contacts[0]["lastName"] is None
    assert ui.form["firstName"] == ""
    assert ui.editing is None


def test_submit_requires_name_and_email(ui, api):
    ui.form.update(firstName="Ana", email="  ")
    assert ui.submit() is False
    assert api.list() == []


def test_edit_then_submit_updates(ui):
    ui.form.update(firstName="Ana", lastName="Lopez", email="ana@x.com")
    ui.submit()

    ui.edit(ui.contacts[0])
    assert ui.editing is not None
    assert ui.form["lastName"] == "Lopez"
    assert ui.form["phone"] == ""

    ui.form["company"] = "Acme"
    ui.form["lastName"] = ""
    assert ui.submit() is True

    assert ui.editing is None
    assert ui.contacts[0]["company"] == "Acme"
    assert ui.contacts[0]["lastName"] is None
    assert ui.contacts[0]["updatedAt"] is not None


def test_cancel_discards_edit(ui):
    ui.form.update(firstName="Ana", email="ana@x.com")
    ui.submit()

    ui.edit(ui.contacts[0])
    ui.form["company"] = "Acme"
    ui.cancel()

    assert ui.editing is None
    assert ui.form["firstName"] == ""
    assert ui.load()[0]["company"] is None


def test_search_keeps_term_for_reload(ui):
    for name in ("Ana", "Bob"):
        ui.form.update(firstName=name, email=f"{name.lower()}@x.com")
        ui.submit()

    assert [c["firstName"] for c in ui.search("bob")] == ["Bob"]
    assert [c["firstName"] for c in ui.load()] == ["Bob"]
    assert len(ui.search("")) == 2


def test_delete_asks_first(ui):
    ui.form.update(firstName="Ana", email="ana@x.com")
    ui.submit()
    contact_id = ui.contacts[0]["id"]

    assert ui.delete(contact_id, confirm=lambda msg: False) is False
    assert len(ui.contacts) == 1

    prompts = []
    assert ui.delete(contact_id, confirm=lambda msg: prompts.append(msg) or True) is True
    assert prompts == ["Delete contact?"]
    assert ui.contacts == []

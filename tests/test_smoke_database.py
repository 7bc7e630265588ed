# tests/test_smoke_database.py
"""
CRUD checks for the disease record service.
"""
import pytest

from database.errors import NotFound, StorageError, ValidationError
from database.queries import (
    count_diseases,
    create_disease,
    delete_disease,
    get_disease,
    list_diseases,
    update_disease,
)
from database.seed import SEED_DISEASES

ASTHMA = {
    "name": "Asthma",
    "symptoms": "Wheezing, shortness of breath, chest tightness",
    "causes": "Airway inflammation, allergens, cold air",
    "prevention": "Avoid triggers, use controller inhalers",
    "when_to_see_doctor": "If inhaler use increases or breathing is difficult at rest.",
}


def _fields(disease) -> dict:
    data = disease.to_dict()
    data.pop("id")
    return data


def test_create_then_get_returns_same_fields(engine):
    new_id = create_disease(ASTHMA)

    assert isinstance(new_id, int)
    assert _fields(get_disease(new_id)) == ASTHMA


def test_create_with_missing_field_is_rejected(engine):
    partial = dict(ASTHMA)
    del partial["causes"]

    with pytest.raises(ValidationError) as exc:
        create_disease(partial)

    assert "causes" in str(exc.value)
    assert isinstance(exc.value, StorageError)
    assert count_diseases() == 0


def test_update_replaces_all_fields(engine):
    new_id = create_disease(ASTHMA)
    replacement = {
        "name": "Bronchial Asthma",
        "symptoms": "Coughing at night",
        "causes": "Genetics",
        "prevention": "Allergy control",
        "when_to_see_doctor": "Lips turning blue.",
    }

    update_disease(new_id, replacement)

    assert _fields(get_disease(new_id)) == replacement


def test_update_without_all_fields_is_not_a_merge(engine):
    new_id = create_disease(ASTHMA)

    with pytest.raises(ValidationError):
        update_disease(new_id, {"name": "Renamed"})

    assert get_disease(new_id).name == "Asthma"


@pytest.mark.parametrize("op", ["get", "update", "delete"])
def test_unknown_id_raises_not_found(engine, op):
    with pytest.raises(NotFound) as exc:
        if op == "get":
            get_disease(999)
        elif op == "update":
            update_disease(999, ASTHMA)
        else:
            delete_disease(999)

    assert exc.value.disease_id == 999


def test_delete_is_not_idempotent(engine):
    new_id = create_disease(ASTHMA)

    delete_disease(new_id)

    with pytest.raises(NotFound):
        get_disease(new_id)
    with pytest.raises(NotFound):
        delete_disease(new_id)


def test_ids_are_not_reused_after_delete(engine):
    first = create_disease(ASTHMA)
    delete_disease(first)

    second = create_disease(ASTHMA)

    assert second > first


def test_listing_keeps_insertion_order(seeded):
    a = create_disease({**ASTHMA, "name": "A"})
    b = create_disease({**ASTHMA, "name": "B"})
    c = create_disease({**ASTHMA, "name": "C"})
    delete_disease(b)

    names = [d.name for d in list_diseases()]

    assert names == [d["name"] for d in SEED_DISEASES] + ["A", "C"]
    assert [d.id for d in list_diseases()][-2:] == [a, c]

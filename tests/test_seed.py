import pytest
from sqlalchemy import create_engine

from database.db_setup import init_db
from database.errors import StorageUnavailable
from database.queries import count_diseases, create_disease, list_diseases
from database.seed import SEED_DISEASES, seed_if_empty


def test_seed_populates_empty_catalog(engine):
    inserted = seed_if_empty()

    assert inserted == 5
    assert [d.name for d in list_diseases()] == [
        "Diabetes",
        "Dengue",
        "Malaria",
        "Common Cold",
        "Hypertension",
    ]


def test_seed_twice_is_a_noop(engine):
    seed_if_empty()
    assert seed_if_empty() == 0
    assert count_diseases() == len(SEED_DISEASES)


def test_seed_skips_non_empty_catalog(engine):
    create_disease(SEED_DISEASES[0])

    assert seed_if_empty() == 0
    assert count_diseases() == 1


def test_init_db_is_idempotent(seeded):
    init_db(seeded)

    assert count_diseases() == len(SEED_DISEASES)


def test_init_db_unreachable_database(tmp_path):
    # parent directory does not exist, SQLite cannot create the file
    engine = create_engine(f"sqlite:///{tmp_path}/missing/dir/diseases.db")

    with pytest.raises(StorageUnavailable):
        init_db(engine)

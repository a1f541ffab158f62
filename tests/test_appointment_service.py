from __future__ import annotations

import pytest

from vipcortes.services.appointment_service import AppointmentService
from vipcortes.services.errors import ValidationError


@pytest.fixture()
def service(storage):
    return AppointmentService(storage.appointments)


def test_create_on_empty_store_defaults_optional_fields(service):
    created = service.create("Ana", "corte", "2024-05-01")

    assert created["id"] == 1
    rows = service.list()
    assert len(rows) == 1
    row = rows[0]
    assert row["id"] == 1
    assert row["name"] == "Ana"
    assert row["service"] == "corte"
    assert row["data_agendamento"] == "2024-05-01"
    assert row["age"] is None
    assert row["phone"] == ""
    assert row["observacoes"] is None
    assert row["usuario_id"] is None


def test_ids_strictly_increase(service):
    ids = []
    for i in range(5):
        new_id = service.create(f"Cliente {i}", "corte", "2024-05-01")["id"]
        assert all(new_id > previous for previous in ids)
        ids.append(new_id)


def test_db_ids_are_never_reused_after_delete(db_storage):
    service = AppointmentService(db_storage.appointments)
    first = service.create("Ana", "corte", "2024-05-01")["id"]
    second = service.create("Bia", "corte", "2024-05-01")["id"]
    service.delete(second)

    third = service.create("Caio", "corte", "2024-05-01")["id"]

    assert third > second > first


def test_file_ids_continue_from_current_max_after_delete(json_storage):
    # FILE mode numbers records max(id) + 1 over what is on disk
    service = AppointmentService(json_storage.appointments)
    first = service.create("Ana", "corte", "2024-05-01")["id"]
    second = service.create("Bia", "corte", "2024-05-01")["id"]
    service.delete(second)

    third = service.create("Caio", "corte", "2024-05-01")["id"]

    assert third == first + 1


def test_list_sorted_by_date_then_time(service, storage):
    service.create("C", "corte", "2024-05-02", time="09:00")
    service.create("B", "corte", "2024-05-01", time="15:00")
    service.create("A", "corte", "2024-05-01", time="10:30")
    # records written without a date (older front-end) come first
    storage.appointments.create({"name": "Sem data", "service": "corte"})

    names = [r["name"] for r in service.list()]

    assert names == ["Sem data", "A", "B", "C"]


def test_list_filters_by_owner(service):
    service.create("Ana", "corte", "2024-05-01", usuario_id=1)
    service.create("Bia", "corte", "2024-05-01", usuario_id="2")
    service.create("Caio", "corte", "2024-05-03", usuario_id=1)

    assert [r["name"] for r in service.list(usuario_id=1)] == ["Ana", "Caio"]
    assert [r["name"] for r in service.list(usuario_id=2)] == ["Bia"]
    assert len(service.list()) == 3


def test_optional_fields_are_coerced(service):
    record = service.create(
        " Ana ", "corte", "2024-05-01", time="14:00", age="31", phone=" 9999 ", observacoes="  "
    )

    assert record["name"] == "Ana"
    assert record["age"] == 31
    assert record["phone"] == "9999"
    assert record["hora"] == "14:00:00"
    assert record["observacoes"] is None


def test_delete_missing_id_is_a_noop(service):
    service.create("Ana", "corte", "2024-05-01")
    before = service.list()

    service.delete(999)

    assert service.list() == before


def test_delete_removes_permanently(service):
    record = service.create("Ana", "corte", "2024-05-01")
    service.delete(record["id"])
    service.delete(record["id"])

    assert service.list() == []


@pytest.mark.parametrize(
    "name,svc,date",
    [("", "corte", "2024-05-01"), ("Ana", "", "2024-05-01"), ("Ana", "corte", ""), (None, None, None)],
)
def test_required_fields(service, name, svc, date):
    with pytest.raises(ValidationError):
        service.create(name, svc, date)


def test_malformed_values_are_rejected(service):
    with pytest.raises(ValidationError):
        service.create("Ana", "corte", "01/05/2024")
    with pytest.raises(ValidationError):
        service.create("Ana", "corte", "2024-05-01", time="meio-dia")
    with pytest.raises(ValidationError):
        service.create("Ana", "corte", "2024-05-01", age="trinta")
    assert service.list() == []


def test_out_of_range_integers_are_rejected(service):
    with pytest.raises(ValidationError):
        service.create("Ana", "corte", "2024-05-01", age="99999999999999999999")
    with pytest.raises(ValidationError):
        service.list(usuario_id=2**31)
    service.delete(2**63)
    assert service.list() == []

from __future__ import annotations

from pathlib import Path

import pytest

from sortbench.domain.models import Service
from sortbench.infrastructure.dataset_io import (
    SORTED_OUTPUT_HEADER,
    DatasetLoadError,
    DatasetOpenError,
    DatasetSaveError,
    EmptyDatasetError,
    dataset_path,
    format_service,
    load_services,
    parse_service_line,
    save_services,
)


def test_parse_well_formed_line() -> None:
    service = parse_service_line("Cloud migration,1500.50,30,300.25\n")

    assert service.name == "Cloud migration"
    assert service.cost == 1500.50
    assert service.duration == 30
    assert service.prepayment == 300.25


def test_non_numeric_cost_defaults_to_zero_without_rejecting_row() -> None:
    service = parse_service_line("Support,abc,10,5.0")

    assert service.name == "Support"
    assert service.cost == 0.0
    assert service.duration == 10
    assert service.prepayment == 5.0


@pytest.mark.parametrize(
    "line, expected",
    [
        ("OnlyName", ("OnlyName", 0.0, 0, 0.0)),
        ("Name,12.5", ("Name", 12.5, 0, 0.0)),
        ("Name,12.5,7", ("Name", 12.5, 7, 0.0)),
        ("Name,,x,", ("Name", 0.0, 0, 0.0)),
        (",1,2,3", ("", 1.0, 2, 3.0)),
    ],
)
def test_missing_fields_default_to_zero(line: str, expected: tuple) -> None:
    service = parse_service_line(line)
    assert (service.name, service.cost, service.duration, service.prepayment) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Name, 12abc,10.9days, 3e2", (12.0, 10, 300.0)),
        ("Name,-4.5,-3,.5", (-4.5, -3, 0.5)),
        ("Name,1e999,99999999999,2", (0.0, 0, 2.0)),
        ("Name,1.5,2,3.25,extra", (1.5, 2, 3.25)),
    ],
)
def test_numeric_fields_use_leading_numeric_prefix(line: str, expected: tuple) -> None:
    service = parse_service_line(line)
    assert (service.cost, service.duration, service.prepayment) == expected


def test_format_service_uses_two_decimals_for_money() -> None:
    service = Service(name="Audit", cost=1234.5, duration=14, prepayment=0.125)

    assert format_service(service) == "Audit,1234.50,14,0.12"


def test_dataset_path_uses_size_in_pattern(tmp_path: Path) -> None:
    path = dataset_path(tmp_path, "it_services_dataset_diverse_{size}.csv", 8100)

    assert path == tmp_path / "it_services_dataset_diverse_8100.csv"


def test_load_services_skips_header_and_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    path.write_text(
        "name,cost,duration,prepayment\nA,1.00,2,0.50\n\nB,bad,3,1.00\n", encoding="utf-8"
    )

    services = load_services(path)

    assert [s.name for s in services] == ["A", "B"]
    assert services[1].cost == 0.0


def test_load_services_header_only_is_reported_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "header_only.csv"
    path.write_text("name,cost,duration,prepayment\n", encoding="utf-8")

    with pytest.raises(EmptyDatasetError) as excinfo:
        load_services(path)

    assert isinstance(excinfo.value, DatasetLoadError)
    assert excinfo.value.path == path


def test_load_services_empty_file_is_reported_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(EmptyDatasetError):
        load_services(path)


def test_load_services_missing_file_raises_open_error(tmp_path: Path) -> None:
    with pytest.raises(DatasetOpenError) as excinfo:
        load_services(tmp_path / "missing.csv")

    assert "missing.csv" in str(excinfo.value)


def test_save_services_writes_header_and_rows(tmp_path: Path) -> None:
    path = tmp_path / "sorted.csv"
    services = [
        Service(name="C", cost=5.0, duration=1, prepayment=1.0),
        Service(name="A", cost=10.0, duration=5, prepayment=2.0),
    ]

    written = save_services(path, services)

    assert written == 2
    assert path.read_text(encoding="utf-8").splitlines() == [
        SORTED_OUTPUT_HEADER,
        "C,5.00,1,1.00",
        "A,10.00,5,2.00",
    ]


def test_save_services_unwritable_path_raises(tmp_path: Path) -> None:
    with pytest.raises(DatasetSaveError):
        save_services(tmp_path / "no_such_dir" / "sorted.csv", [])


def test_saved_file_loads_back_with_same_keys(tmp_path: Path) -> None:
    path = tmp_path / "roundtrip.csv"
    services = [Service(name="X", cost=19.99, duration=4, prepayment=5.5)]

    save_services(path, services)

    assert load_services(path) == services


LEGACY_NAME = "Поддержка".encode("cp1251")


def test_load_services_accepts_bytes_that_are_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "legacy.csv"
    path.write_bytes(b"name,cost,duration,prepayment\n" + LEGACY_NAME + b",10.0,1,2.0\n")

    services = load_services(path)

    assert len(services) == 1
    assert (services[0].cost, services[0].duration, services[0].prepayment) == (10.0, 1, 2.0)


def test_save_services_writes_undecodable_name_bytes_back_unchanged(tmp_path: Path) -> None:
    source = tmp_path / "legacy.csv"
    source.write_bytes(b"name,cost,duration,prepayment\n" + LEGACY_NAME + b",10.0,1,2.0\n")
    target = tmp_path / "sorted.csv"

    save_services(target, load_services(source))

    rows = target.read_bytes().splitlines()
    assert rows[0] == SORTED_OUTPUT_HEADER.encode("utf-8")
    assert rows[1] == LEGACY_NAME + b",10.00,1,2.00"

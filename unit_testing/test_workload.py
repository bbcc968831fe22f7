import pandas as pd
import pytest

from loadtable.config.time_config import get_active_config
from loadtable.models.subject import Subject
from loadtable.scheduler.workload import normalize_rows


def workload_row(**overrides):
    row = {
        "Faculty Name": "Dr. Rao",
        "Subject": "DBMS Lab",
        "Sub Code": "CS301",
        "Year": "3",
        "Sec": "A",
        "L": "0",
        "P": "2",
        "Load (L+P)": "2",
    }
    row.update(overrides)
    return row


# -----------------------------
# accepted rows
# -----------------------------
def test_lab_row_becomes_lab_subject():
    subjects = normalize_rows([workload_row()])
    assert subjects == [
        Subject(code="CS301", name="DBMS Lab", faculty="Dr. Rao", year="3", section="A",
                lecture_hours=0, practical_hours=2, total_load=2, is_lab=True)
    ]


def test_theory_row_without_p_or_load():
    row = {"Faculty Name": "Dr. Iyer", "Subject": "Operating Systems", "Sub Code": "CS302", "L": "3"}
    (subject,) = normalize_rows([row])
    assert subject.is_lab is False
    assert subject.lecture_hours == 3
    assert subject.practical_hours == 0
    assert subject.total_load == 0
    assert subject.year == ""
    assert subject.section == ""


@pytest.mark.parametrize("name, is_lab", [
    ("DBMS Lab", True),
    ("COMPUTER NETWORKS LAB", True),
    ("Operating Systems", False),
])
def test_lab_flag_follows_name(name, is_lab):
    (subject,) = normalize_rows([workload_row(Subject=name)])
    assert subject.is_lab is is_lab


# -----------------------------
# dropped rows
# -----------------------------
@pytest.mark.parametrize("column", ["Faculty Name", "Subject", "Sub Code"])
def test_row_missing_identity_field_is_dropped(column):
    row = workload_row()
    del row[column]
    assert normalize_rows([row]) == []


@pytest.mark.parametrize("blank", [None, "", "   ", float("nan")])
def test_blank_identity_field_is_dropped(blank):
    assert normalize_rows([workload_row(**{"Sub Code": blank})]) == []


def test_only_invalid_rows_gives_empty_list():
    rows = [{"Subject": "Maths"}, {}, workload_row(**{"Faculty Name": None})]
    assert normalize_rows(rows) == []
    assert normalize_rows([]) == []


# -----------------------------
# numeric defaulting
# -----------------------------
@pytest.mark.parametrize("raw, expected", [
    ("4", 4),
    (4, 4),
    (4.0, 4),
    ("3 hrs", 3),
    ("abc", 0),
    ("", 0),
    (None, 0),
    (float("nan"), 0),
    ("-2", 0),
])
def test_hour_fields_parse_or_default_to_zero(raw, expected):
    (subject,) = normalize_rows([workload_row(L=raw, P=raw, **{"Load (L+P)": raw})])
    assert subject.lecture_hours == expected
    assert subject.practical_hours == expected
    assert subject.total_load == expected


def test_text_fields_are_cleaned():
    row = workload_row(**{"Faculty Name": "  Dr. Rao ", "Year": 3.0, "Sec": float("nan")})
    (subject,) = normalize_rows([row])
    assert subject.faculty == "Dr. Rao"
    assert subject.year == "3"
    assert subject.section == ""


# -----------------------------
# sequence behaviour
# -----------------------------
def test_order_preserved_and_duplicates_kept():
    rows = [
        workload_row(**{"Sub Code": "CS310", "Subject": "Compilers"}),
        workload_row(),
        workload_row(),
    ]
    subjects = normalize_rows(rows)
    assert [s.code for s in subjects] == ["CS310", "CS301", "CS301"]
    assert subjects[1] == subjects[2]


def test_normalization_is_idempotent():
    rows = [workload_row(), workload_row(Subject="Algorithms", L="4", P=None), {"Subject": "x"}]
    assert normalize_rows(rows) == normalize_rows(rows)


def test_dataframe_input():
    df = pd.DataFrame([
        workload_row(),
        {"Faculty Name": "Dr. Iyer", "Subject": "Operating Systems", "Sub Code": None, "L": 3},
        {"Faculty Name": "Dr. Iyer", "Subject": "Networks", "Sub Code": "CS305", "Year": 2, "L": 3},
    ])
    subjects = normalize_rows(df)
    assert [s.code for s in subjects] == ["CS301", "CS305"]
    assert subjects[1].lecture_hours == 3
    assert subjects[1].section == ""
    assert subjects[1].total_load == 0


def test_custom_column_labels():
    config = get_active_config()
    config["columns"]["code"] = "Course Code"
    row = workload_row()
    row["Course Code"] = row.pop("Sub Code")
    (subject,) = normalize_rows([row], config=config)
    assert subject.code == "CS301"


@pytest.mark.parametrize("bad", ["workload.xlsx", 42, [1, 2]])
def test_unsupported_input_raises(bad):
    with pytest.raises(ValueError):
        normalize_rows(bad)

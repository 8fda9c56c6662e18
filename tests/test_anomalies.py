from datetime import datetime, timezone

from app.models.anomaly import Anomaly
from app.schemas.anomaly import AnomalyIn
from app.services.anomalies import AnomalyLog


def make_anomaly(code="F2", data=None, **extra):
    return AnomalyIn(
        tecido_codigo=code,
        data=data,
        quadrante=extra.pop("quadrante", "Q1"),
        condicao=extra.pop("condicao", "rasgo"),
        responsavel=extra.pop("responsavel", "ana"),
        **extra,
    )


def test_report_assigns_id_and_logged_at(db):
    log = AnomalyLog(db)
    entry = log.report(make_anomaly(observacoes="canto superior"))

    assert entry.id is not None
    assert entry.logged_at is not None
    assert entry.notes == "canto superior"
    assert db.get(Anomaly, entry.id).condition == "rasgo"


def test_report_against_unknown_fabric_succeeds(db):
    log = AnomalyLog(db)
    entry = log.report(make_anomaly(code="DOES-NOT-EXIST"))

    assert entry.fabric_code == "DOES-NOT-EXIST"
    assert [a.id for a in log.list_anomalies()] == [entry.id]


def test_ids_are_distinct(db):
    log = AnomalyLog(db)
    first = log.report(make_anomaly())
    second = log.report(make_anomaly())
    assert first.id != second.id


def test_observed_at_defaults_to_now(db):
    before = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
    entry = AnomalyLog(db).report(make_anomaly())
    assert entry.observed_at.replace(tzinfo=None) >= before


def test_list_sorted_by_observed_at_descending(db):
    log = AnomalyLog(db)
    dates = [datetime(2024, 4, 2), datetime(2024, 1, 15), datetime(2024, 9, 30)]
    for d in dates:
        log.report(make_anomaly(data=d))

    listed = [a.observed_at.replace(tzinfo=None) for a in log.list_anomalies()]
    assert listed == sorted(dates, reverse=True)

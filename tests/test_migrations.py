from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ROOT = Path(__file__).resolve().parents[1]


def alembic_config(url):
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", url)
    cfg.attributes["configure_logger"] = False
    return cfg


def test_upgrade_and_downgrade(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    cfg = alembic_config(url)

    command.upgrade(cfg, "head")
    engine = create_engine(url)
    try:
        insp = inspect(engine)
        assert {"tecidos", "anomalias"} <= set(insp.get_table_names())
        indexes = {ix["name"]: ix for ix in insp.get_indexes("tecidos")}
        assert indexes["uq_tecidos_active_position"]["unique"]
        assert insp.get_foreign_keys("anomalias") == []

        command.downgrade(cfg, "base")
        assert not {"tecidos", "anomalias"} & set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
